"""Command-line interface for the cafeteria simulation."""

import argparse
import json
import logging
import sys
import numpy as np
from scipy import stats
from typing import Any, Callable, Dict, List, Optional

from ..core import EmptyDispatch, NoTraysToReturn, TraysExhausted
from ..core.base import MAX_PRIORITY, MIN_PRIORITY
from ..core.ledger import DEFAULT_WINDOW_SIZE
from ..distributions.random_variables import (
    poisson_distribution,
    bernoulli_distribution,
    integer_uniform_distribution,
)
from ..routing import FacilityGraph, format_distance_table, sample_facility_graph
from ..system import CafeteriaSystem
from ..system.cafeteria_system import FIRST_TRAY_ID
from .interactive import run_interactive


DEFAULT_CONFIG: Dict[str, Any] = {
    'tray_capacity': 50,
    'trays_available': 30,
    'first_tray_id': FIRST_TRAY_ID,
    'window_size': DEFAULT_WINDOW_SIZE,
}


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """Load a JSON configuration file on top of the defaults."""
    config = dict(DEFAULT_CONFIG)
    if path:
        with open(path, 'r') as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise ValueError(f"{path} must contain a JSON object")
        config.update(loaded)
    return config


def build_graph(graph_config: Optional[Dict[str, Any]]) -> FacilityGraph:
    """Create the facility graph from configuration, or the sample layout."""
    if not graph_config:
        return sample_facility_graph()
    num_nodes = int(graph_config['nodes'])
    if num_nodes < 1:
        raise ValueError("graph must have at least one node")
    graph = FacilityGraph(num_nodes)
    graph.add_edges(graph_config.get('edges', []))
    return graph


def build_system(config: Dict[str, Any],
                 graph: Optional[FacilityGraph] = None) -> CafeteriaSystem:
    """Create a cafeteria system from a configuration dict."""
    if graph is None:
        graph = build_graph(config.get('graph'))
    return CafeteriaSystem(
        tray_capacity=int(config['tray_capacity']),
        trays_available=int(config['trays_available']),
        graph=graph,
        window_size=int(config.get('window_size', DEFAULT_WINDOW_SIZE)),
        first_tray_id=int(config.get('first_tray_id', FIRST_TRAY_ID)),
    )


def run_scenario(system: CafeteriaSystem,
                 steps: int,
                 student_arrivals: Callable[[], int],
                 faculty_arrivals: Callable[[], int],
                 faculty_priority: Callable[[], int],
                 serve_attempt: Callable[[], bool],
                 return_attempt: Callable[[], bool]) -> Dict:
    """Drive the system through ``steps`` rounds of random activity.

    Each round: new students, new faculty, maybe a serve, maybe a tray
    return. Refused operations are counted, not raised.
    """
    refused = {'trays_exhausted': 0, 'empty_dispatch': 0, 'no_trays_to_return': 0}

    for _ in range(steps):
        for _ in range(student_arrivals()):
            system.add_student(f"Student-{system.clock.tokens_issued + 1}")
        for _ in range(faculty_arrivals()):
            system.add_faculty(f"Faculty-{system.clock.tokens_issued + 1}",
                               faculty_priority())

        if serve_attempt():
            try:
                system.serve_next()
            except TraysExhausted:
                refused['trays_exhausted'] += 1
            except EmptyDispatch:
                refused['empty_dispatch'] += 1

        if return_attempt():
            try:
                system.return_tray()
            except NoTraysToReturn:
                refused['no_trays_to_return'] += 1

    metrics = system.get_metrics_summary()
    metrics['system'].update({f"refused_{k}": v for k, v in refused.items()})
    return metrics


def run_simulation(system: CafeteriaSystem,
                   steps: int,
                   student_rate: float = 0.6,
                   faculty_rate: float = 0.2,
                   serve_prob: float = 0.8,
                   return_prob: float = 0.7,
                   random_seed: Optional[int] = None) -> Dict:
    """Run a single seeded scenario and return metrics."""
    if random_seed is not None:
        np.random.seed(random_seed)

    system.reset()
    return run_scenario(
        system,
        steps,
        student_arrivals=poisson_distribution(student_rate),
        faculty_arrivals=poisson_distribution(faculty_rate),
        faculty_priority=integer_uniform_distribution(MIN_PRIORITY, MAX_PRIORITY),
        serve_attempt=bernoulli_distribution(serve_prob),
        return_attempt=bernoulli_distribution(return_prob),
    )


def _summarize(values: List[float]) -> Dict[str, float]:
    n = len(values)
    std = float(np.std(values, ddof=1)) if n > 1 else 0.0
    if n > 1:
        half_width = float(stats.t.ppf(0.975, n - 1) * std / np.sqrt(n))
    else:
        half_width = 0.0
    return {
        'mean': float(np.mean(values)),
        'std': std,
        'min': float(np.min(values)),
        'max': float(np.max(values)),
        'ci95': half_width,
    }


def run_replications(system: CafeteriaSystem,
                     steps: int,
                     num_replications: int,
                     base_seed: int = 42,
                     **rates) -> Dict:
    """Run multiple replications and compute statistics."""
    results = []

    for i in range(num_replications):
        seed = base_seed + i
        metrics = run_simulation(system, steps, random_seed=seed, **rates)
        results.append(metrics)

    summary = {
        'replications': num_replications,
        'steps': steps,
        'system': {},
        'components': {}
    }

    for key in results[0]['system'].keys():
        summary['system'][key] = _summarize([r['system'][key] for r in results])

    for comp_id in results[0]['components'].keys():
        summary['components'][comp_id] = {}
        for key in results[0]['components'][comp_id].keys():
            values = [r['components'][comp_id][key] for r in results]
            summary['components'][comp_id][key] = _summarize(values)

    return summary


def save_results(results: Dict, output_path: str) -> None:
    """Save results to JSON file."""
    with open(output_path, 'w') as f:
        json.dump(results, f, indent=2)


def print_results(results: Dict, detailed: bool = False) -> None:
    """Print results to console."""
    print("\n=== Simulation Results ===")

    if 'replications' in results:
        print(f"Replications: {results['replications']}")
        print(f"Steps: {results['steps']}")

        print("\nSystem Metrics:")
        for metric, summary in results['system'].items():
            print(f"  {metric}:")
            print(f"    Mean: {summary['mean']:.4f} (±{summary['std']:.4f})")
            if detailed:
                print(f"    Min: {summary['min']:.4f}, Max: {summary['max']:.4f}")
                print(f"    95% CI: ±{summary['ci95']:.4f}")

        print("\nComponent Metrics:")
        for comp_id, metrics in results['components'].items():
            print(f"  {comp_id}:")
            for metric, summary in metrics.items():
                print(f"    {metric}: {summary['mean']:.4f} (±{summary['std']:.4f})")
    else:
        print("\nSystem Metrics:")
        for metric, value in results['system'].items():
            print(f"  {metric}: {value:.4f}")

        print("\nComponent Metrics:")
        for comp_id, metrics in results['components'].items():
            print(f"  {comp_id}:")
            for metric, value in metrics.items():
                print(f"    {metric}: {value:.4f}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Cafeteria queueing simulation')
    parser.add_argument('--config', type=str,
                        help='JSON configuration file')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')

    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('interactive', help='Menu-driven console session')

    scenario = sub.add_parser('scenario', help='Randomized batch scenario')
    scenario.add_argument('-n', '--steps', type=int, default=200,
                          help='Number of simulation rounds (default: 200)')
    scenario.add_argument('-r', '--replications', type=int, default=1,
                          help='Number of replications (default: 1)')
    scenario.add_argument('-s', '--seed', type=int, default=42,
                          help='Random seed (default: 42)')
    scenario.add_argument('--student-rate', type=float, default=0.6,
                          help='Mean student arrivals per round (default: 0.6)')
    scenario.add_argument('--faculty-rate', type=float, default=0.2,
                          help='Mean faculty arrivals per round (default: 0.2)')
    scenario.add_argument('--serve-prob', type=float, default=0.8,
                          help='Probability of a serve per round (default: 0.8)')
    scenario.add_argument('--return-prob', type=float, default=0.7,
                          help='Probability of a tray return per round (default: 0.7)')
    scenario.add_argument('--capacity', type=int,
                          help='Tray capacity (overrides config)')
    scenario.add_argument('--available', type=int,
                          help='Starting available trays (overrides config)')
    scenario.add_argument('-o', '--output', type=str,
                          help='Output file for results (JSON)')
    scenario.add_argument('-p', '--plot', action='store_true',
                          help='Generate plots')
    scenario.add_argument('--plot-file', type=str,
                          help='Save plots to file')
    scenario.add_argument('-d', '--detailed', action='store_true',
                          help='Show detailed statistics')
    scenario.add_argument('-q', '--quiet', action='store_true',
                          help='Suppress console output')

    paths = sub.add_parser('paths', help='Shortest paths on the facility graph')
    paths.add_argument('source', type=int, help='Source node')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error: could not load config: {e}")
        return 1

    if args.command == 'scenario':
        if args.capacity is not None:
            config['tray_capacity'] = args.capacity
        if args.available is not None:
            config['trays_available'] = args.available

    try:
        graph = build_graph(config.get('graph'))
        if args.command == 'scenario':
            system = build_system(config, graph)
    except (KeyError, TypeError, ValueError) as e:
        print(f"Error: invalid configuration: {e}")
        return 1

    if args.command == 'interactive':
        return run_interactive(graph=graph)

    if args.command == 'paths':
        try:
            distances = graph.shortest_paths(args.source)
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        print(format_distance_table(args.source, distances))
        return 0

    rates = dict(student_rate=args.student_rate, faculty_rate=args.faculty_rate,
                 serve_prob=args.serve_prob, return_prob=args.return_prob)
    if args.replications > 1:
        results = run_replications(system, args.steps, args.replications,
                                   args.seed, **rates)
    else:
        results = run_simulation(system, args.steps, random_seed=args.seed, **rates)

    if not args.quiet:
        print_results(results, args.detailed)

    if args.output:
        save_results(results, args.output)
        if not args.quiet:
            print(f"\nResults saved to: {args.output}")

    if args.plot or args.plot_file:
        # Plots need the ledger of a single run
        if args.replications > 1:
            if not args.quiet:
                print("\nRunning additional simulation for plotting...")
            run_simulation(system, args.steps, random_seed=args.seed, **rates)

        from ..visualization import create_performance_report
        create_performance_report(system, save_path=args.plot_file)
        if args.plot_file and not args.quiet:
            print(f"Plot saved to: {args.plot_file}")

        if args.plot:
            import matplotlib.pyplot as plt
            plt.show()

    return 0


if __name__ == '__main__':
    sys.exit(main())

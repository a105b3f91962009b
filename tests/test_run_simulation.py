import json

import matplotlib
matplotlib.use("Agg")

import pytest

from cafeteria_system import CafeteriaSystem
from cafeteria_system.distributions import (
    bernoulli_distribution,
    deterministic_distribution,
    integer_uniform_distribution,
    poisson_distribution,
)
from cafeteria_system.scripts.run_simulation import (
    build_graph,
    build_system,
    load_config,
    main,
    run_replications,
    run_scenario,
    run_simulation,
)
from cafeteria_system.visualization import create_performance_report


def test_load_config_defaults():
    config = load_config(None)
    assert config['tray_capacity'] == 50
    assert config['trays_available'] == 30
    assert config['window_size'] == 5


def test_load_config_file(tmp_path):
    path = tmp_path / "cafe.json"
    path.write_text(json.dumps({
        "tray_capacity": 8,
        "trays_available": 4,
        "graph": {"nodes": 3, "edges": [[0, 1, 2], [1, 2, 2], [2, 9, 1]]},
    }))

    system = build_system(load_config(str(path)))
    assert system.tray_capacity == 8
    assert system.trays_available == 4
    assert system.graph.num_nodes == 3
    assert system.graph.edge_count == 2
    assert system.shortest_paths(0) == [0, 2, 4]


def test_build_graph_defaults_to_sample():
    assert build_graph(None).shortest_paths(0) == [0, 3, 2, 4, 10, 9]


def test_deterministic_scenario():
    system = CafeteriaSystem(tray_capacity=5, trays_available=2)
    metrics = run_scenario(
        system,
        steps=3,
        student_arrivals=deterministic_distribution(1),
        faculty_arrivals=deterministic_distribution(0),
        faculty_priority=deterministic_distribution(1),
        serve_attempt=deterministic_distribution(True),
        return_attempt=deterministic_distribution(False),
    )

    # Two trays only: the third serve is refused and that student keeps waiting.
    assert metrics['system']['total_customers_served'] == 2
    assert metrics['system']['refused_trays_exhausted'] == 1
    assert metrics['system']['customers_waiting'] == 1
    assert metrics['system']['trays_available'] == 0


def test_scenario_counts_refused_returns_and_empty_serves():
    system = CafeteriaSystem(tray_capacity=5, trays_available=5)
    metrics = run_scenario(
        system,
        steps=2,
        student_arrivals=deterministic_distribution(0),
        faculty_arrivals=deterministic_distribution(0),
        faculty_priority=deterministic_distribution(1),
        serve_attempt=deterministic_distribution(True),
        return_attempt=deterministic_distribution(True),
    )
    assert metrics['system']['refused_empty_dispatch'] == 2
    assert metrics['system']['refused_no_trays_to_return'] == 2


def test_seeded_runs_are_reproducible():
    system = CafeteriaSystem(tray_capacity=20, trays_available=10)
    first = run_simulation(system, 50, random_seed=7)
    second = run_simulation(system, 50, random_seed=7)
    assert first == second


def test_tray_invariants_hold_in_random_run():
    system = CafeteriaSystem(tray_capacity=20, trays_available=10)
    run_simulation(system, 300, student_rate=1.0, faculty_rate=0.5, random_seed=3)

    ids = system.tray_records()
    assert ids == sorted(set(ids))
    assert 0 <= system.trays_available <= system.tray_capacity
    assert all(r.wait_time >= 1 for r in system.ledger)
    assert len(system.ledger.window()) <= 5


def test_replications_summary():
    system = CafeteriaSystem(tray_capacity=20, trays_available=10)
    summary = run_replications(system, 30, 3, base_seed=1)

    assert summary['replications'] == 3
    served = summary['system']['total_customers_served']
    assert served['min'] <= served['mean'] <= served['max']
    assert served['ci95'] >= 0.0
    assert 'faculty' in summary['components']


def test_distribution_factories():
    assert poisson_distribution(0)() == 0
    assert bernoulli_distribution(1.0)() is True
    assert bernoulli_distribution(0.0)() is False
    assert integer_uniform_distribution(4, 4)() == 4
    with pytest.raises(ValueError):
        bernoulli_distribution(1.5)
    with pytest.raises(ValueError):
        integer_uniform_distribution(5, 1)


def test_cli_scenario_writes_json(tmp_path, capsys):
    out = tmp_path / "results.json"
    status = main(["scenario", "-n", "20", "-s", "5", "-o", str(out)])

    assert status == 0
    data = json.loads(out.read_text())
    assert 'system' in data and 'components' in data
    assert "Simulation Results" in capsys.readouterr().out


def test_cli_scenario_replications_quiet(capsys):
    assert main(["scenario", "-n", "10", "-r", "2", "-q"]) == 0
    assert capsys.readouterr().out == ""


def test_cli_paths(capsys):
    assert main(["paths", "0"]) == 0
    out = capsys.readouterr().out
    assert "To node 4 = 10" in out
    assert "To node 5 = 9" in out


def test_cli_paths_bad_source(capsys):
    assert main(["paths", "9"]) == 1


def test_cli_missing_config(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "nope.json"), "paths", "0"]) == 1
    assert "could not load config" in capsys.readouterr().out


@pytest.mark.parametrize("config", [
    {"graph": {"edges": [[0, 1, 3]]}},
    {"graph": {"nodes": 2, "edges": [[0, 1, -3]]}},
    {"graph": {"nodes": 0}},
    {"graph": {"nodes": "many"}},
])
@pytest.mark.parametrize("command", [["paths", "0"], ["interactive"], ["scenario", "-q"]])
def test_cli_malformed_graph_config(tmp_path, capsys, config, command):
    path = tmp_path / "cafe.json"
    path.write_text(json.dumps(config))

    assert main(["--config", str(path)] + command) == 1
    assert "invalid configuration" in capsys.readouterr().out


def test_cli_config_must_be_an_object(tmp_path, capsys):
    path = tmp_path / "cafe.json"
    path.write_text(json.dumps([1, 2, 3]))

    assert main(["--config", str(path), "paths", "0"]) == 1
    assert "must contain a JSON object" in capsys.readouterr().out


def test_build_graph_rejects_empty_graph():
    with pytest.raises(ValueError):
        build_graph({"nodes": 0})


def test_cli_invalid_capacity(capsys):
    assert main(["scenario", "--capacity", "0", "--available", "0", "-q"]) == 1


def test_cli_plot_file(tmp_path):
    plot = tmp_path / "report.png"
    assert main(["scenario", "-n", "20", "-q", "--plot-file", str(plot)]) == 0
    assert plot.exists()
    assert (tmp_path / "report_waits.png").exists()


def test_performance_report_with_empty_ledger():
    system = CafeteriaSystem(tray_capacity=5, trays_available=5)
    dashboard, waits = create_performance_report(system)
    assert dashboard is not None and waits is not None


def test_package_entry_point_is_cli_main():
    from cafeteria_system import main as entry

    assert entry.main is main

"""Cafeteria coordinator."""

from .cafeteria_system import CafeteriaSystem, ServiceResult, ReturnResult

__all__ = ['CafeteriaSystem', 'ServiceResult', 'ReturnResult']

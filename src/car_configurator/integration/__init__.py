"""
Module: integration

Purpose:
    Everything downstream of a finished Car: order records, report text,
    document generation and saving to disk.

Key Classes:
    - CarManagementSystem: Car → document facade
    - CarReportGenerator: Report title and body
    - OrderService, Order, OrderStatus: Order records

Key Functions:
    - save_document(): Write document bytes to disk
"""

from .orders import Order, OrderService, OrderStatus
from .report import CarReportGenerator
from .storage import StorageError, save_document
from .system import CarManagementSystem

__all__ = [
    "CarManagementSystem",
    "CarReportGenerator",
    "Order",
    "OrderService",
    "OrderStatus",
    "StorageError",
    "save_document",
]

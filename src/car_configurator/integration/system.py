"""
Module: integration.system

Purpose:
    Wires finished car configurations to document generation and order
    keeping. Car → report text → document in the requested format.

Key Classes:
    - CarManagementSystem: Facade over Editor, CarReportGenerator and OrderService

Dependencies:
    - documents: Editor, DocumentFactory
    - integration.report: CarReportGenerator
    - integration.orders: OrderService

Used By:
    - cli: Console entry point
"""

from __future__ import annotations

import logging
from typing import Optional

from car_configurator.core.models.car import Car
from car_configurator.documents import Document, DocumentFactory, Editor

from .orders import Order, OrderService
from .report import CarReportGenerator

logger = logging.getLogger(__name__)


class CarManagementSystem:
    """
    Generates documents for cars.

    Args:
        documents: A DocumentFactory (a fresh Editor is created around it)
            or an existing Editor
        order_service: Order service to use (a new one by default)
    """

    def __init__(
        self,
        documents: DocumentFactory | Editor,
        order_service: Optional[OrderService] = None,
    ) -> None:
        self.editor = documents if isinstance(documents, Editor) else Editor(documents)
        self.report_generator = CarReportGenerator()
        self.order_service = order_service if order_service is not None else OrderService()

    def generate_car_document(
        self,
        car: Car,
        format_key: str,
        order: Optional[Order] = None,
    ) -> Document:
        """
        Open a new document for car in the given format.

        Args:
            car: Car to document
            format_key: Document format ("pdf", "word", "html"; case-insensitive)
            order: Optional order whose metadata is included

        Returns:
            The editor's new current document

        Raises:
            UnknownDocumentFormatError: If format_key is not registered
        """
        title = self.report_generator.generate_title(car)
        content = self.report_generator.generate_report(car, order)

        self.editor.new_document(format_key, title).edit(content)
        logger.debug(f"Generated {format_key} document '{title}'")
        return self.editor.current_document

    def generate_and_save_car_document(
        self,
        car: Car,
        format_key: str,
        order: Optional[Order] = None,
    ) -> bytes:
        self.generate_car_document(car, format_key, order)
        return self.editor.save()

    def preview_car_document(
        self,
        car: Car,
        format_key: str,
        order: Optional[Order] = None,
    ) -> str:
        self.generate_car_document(car, format_key, order)
        return self.editor.preview()

from .quantity_parser import Quantity, parse_quantity
from .quantity_format import format_amount, format_quantity

__all__ = ["Quantity", "parse_quantity", "format_amount", "format_quantity"]

from .selector import SelectorStatus, ServiceSelector

__all__ = ["SelectorStatus", "ServiceSelector"]

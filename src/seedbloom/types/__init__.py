from seedbloom.types.item_types import ItemKey, normalize_key

__all__ = ["ItemKey", "normalize_key"]

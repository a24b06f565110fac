"""Product domain entity: id, name, category, price, stock count, reorder threshold."""


class Product:
    def __init__(self, id: int, name: str = "", category: str = "", price: float = 0.0,
                 stock: int = 0, reorder_level: int = 0):
        self.id = id
        self.name = name
        self.category = category
        self.price = price
        self._stock = stock
        self.reorder_level = reorder_level

    @property
    def stock(self) -> int:
        return self._stock

    def _adjust_stock(self, delta: int):
        '''Adjusts the stock by delta (can be negative). Only InventoryStore calls this,
        since it must reposition the product in its stock ranking afterwards.'''
        self._stock += delta

    def is_low_stock(self) -> bool:
        return self.stock <= self.reorder_level

    @property
    def sort_key(self):
        return (self.name.lower(), self.id)

    def __str__(self) -> str:
        return (f"[#{self.id}] {self.name} | {self.category} | {self.price:.2f} | "
                f"stock={self.stock} (reorder<={self.reorder_level})")

    __repr__ = __str__

    def to_dict(self):
        '''Converts the Product object to a dictionary.'''
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "price": self.price,
            "stock": self.stock,
            "reorder_level": self.reorder_level,
        }

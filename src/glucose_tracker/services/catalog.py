"""In-memory food catalog."""

from collections.abc import Iterable, Iterator

from glucose_tracker.domain.foods import FoodCategory, FoodItem


class FoodCatalog:
    """Ordered, append-only collection of known foods.

    Lookups scan in declaration order, so when two entries share a name or
    alias the earliest registered one wins.
    """

    def __init__(self, foods: Iterable[FoodItem] = ()) -> None:
        self._foods: list[FoodItem] = list(foods)

    def __len__(self) -> int:
        return len(self._foods)

    def __iter__(self) -> Iterator[FoodItem]:
        return iter(tuple(self._foods))

    @property
    def foods(self) -> tuple[FoodItem, ...]:
        """Snapshot of the catalog in declaration order."""
        return tuple(self._foods)

    def search(self, query: str) -> list[FoodItem]:
        """Return foods whose name or any alias contains ``query``."""
        needle = query.lower()
        return [
            food
            for food in self._foods
            if any(needle in key for key in food.match_keys())
        ]

    def find_exact(self, name: str) -> FoodItem | None:
        """Return the first food whose name or alias equals ``name``."""
        needle = name.lower()
        for food in self._foods:
            if needle in food.match_keys():
                return food
        return None

    def by_category(self, category: FoodCategory) -> list[FoodItem]:
        """Return foods of a category in catalog order."""
        return [food for food in self._foods if food.category == category]

    def add_custom(self, food: FoodItem) -> None:
        """Append a custom food; duplicates are allowed."""
        self._foods.append(food)


def default_catalog() -> FoodCatalog:
    """Build the curated catalog shipped with the app."""
    return FoodCatalog(
        FoodItem(name, coefficient, category, aliases)
        for name, coefficient, category, aliases in _DEFAULT_FOODS
    )


_DEFAULT_FOODS: tuple[tuple[str, float, FoodCategory, tuple[str, ...]], ...] = (
    ("Apple", 0.10, FoodCategory.FRUITS, ("apples", "green apple", "red apple")),
    ("Banana", 0.12, FoodCategory.FRUITS, ("bananas",)),
    ("Orange", 0.09, FoodCategory.FRUITS, ("oranges",)),
    ("Grapes", 0.16, FoodCategory.FRUITS, ("grape",)),
    ("Strawberries", 0.05, FoodCategory.FRUITS, ("strawberry",)),
    ("Blueberries", 0.10, FoodCategory.FRUITS, ("blueberry",)),
    ("Carrot", 0.05, FoodCategory.VEGETABLES, ("carrots",)),
    ("Broccoli", 0.02, FoodCategory.VEGETABLES, ("broccolis",)),
    ("Spinach", 0.01, FoodCategory.VEGETABLES, ("spinach leaves",)),
    (
        "Sweet Potato",
        0.15,
        FoodCategory.VEGETABLES,
        ("sweet potatoes", "yam"),
    ),
    ("Corn", 0.19, FoodCategory.VEGETABLES, ("corn kernels", "sweet corn")),
    ("White Rice", 0.78, FoodCategory.GRAINS, ("rice", "steamed rice")),
    ("Brown Rice", 0.65, FoodCategory.GRAINS, ("brown rice",)),
    ("Quinoa", 0.58, FoodCategory.GRAINS, ("quinoa",)),
    ("Oats", 0.55, FoodCategory.GRAINS, ("oatmeal", "rolled oats")),
    (
        "Bread",
        0.50,
        FoodCategory.GRAINS,
        ("white bread", "slice of bread", "toast"),
    ),
    ("Pasta", 0.71, FoodCategory.GRAINS, ("spaghetti", "noodles")),
    (
        "Chicken Breast",
        0.00,
        FoodCategory.PROTEINS,
        ("chicken", "grilled chicken"),
    ),
    ("Salmon", 0.00, FoodCategory.PROTEINS, ("grilled salmon", "baked salmon")),
    (
        "Eggs",
        0.01,
        FoodCategory.PROTEINS,
        ("egg", "scrambled eggs", "boiled egg"),
    ),
    ("Tofu", 0.02, FoodCategory.PROTEINS, ("tofu",)),
    ("Black Beans", 0.16, FoodCategory.PROTEINS, ("beans", "black bean")),
    ("Milk", 0.05, FoodCategory.DAIRY, ("whole milk", "skim milk", "2% milk")),
    ("Greek Yogurt", 0.04, FoodCategory.DAIRY, ("yogurt", "plain yogurt")),
    ("Cheese", 0.01, FoodCategory.DAIRY, ("cheddar cheese", "mozzarella")),
    (
        "Chocolate",
        0.45,
        FoodCategory.SWEETS,
        ("dark chocolate", "milk chocolate"),
    ),
    ("Ice Cream", 0.22, FoodCategory.SWEETS, ("vanilla ice cream",)),
    (
        "Cookie",
        0.68,
        FoodCategory.SWEETS,
        ("cookies", "chocolate chip cookie"),
    ),
    (
        "Orange Juice",
        0.08,
        FoodCategory.BEVERAGES,
        ("OJ", "fresh orange juice"),
    ),
    ("Soda", 0.11, FoodCategory.BEVERAGES, ("cola", "soft drink", "coke")),
    ("Coffee", 0.00, FoodCategory.BEVERAGES, ("black coffee",)),
    ("Almonds", 0.05, FoodCategory.SNACKS, ("almond", "raw almonds")),
    ("Potato Chips", 0.50, FoodCategory.SNACKS, ("chips", "crisps")),
    (
        "Crackers",
        0.68,
        FoodCategory.SNACKS,
        ("saltine crackers", "wheat crackers"),
    ),
)

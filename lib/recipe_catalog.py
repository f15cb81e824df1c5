"""Recipe records and the catalog shown in the browser."""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Self


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class Recipe:
    """One recipe card's data. Read-only for the life of the page."""
    id: int
    title: str
    category: str
    difficulty: Difficulty
    time: int
    image: str
    description: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "difficulty": self.difficulty.value,
            "time": self.time,
            "image": self.image,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, d: dict) -> Self:
        return cls(
            id=int(d["id"]),
            title=d["title"],
            category=d.get("category", ""),
            difficulty=Difficulty(d["difficulty"]),
            time=int(d["time"]),
            image=d.get("image", ""),
            description=d.get("description", ""),
        )


SAMPLE_RECIPES = (
    Recipe(
        id=1,
        title="Spaghetti Carbonara",
        category="pasta",
        difficulty=Difficulty.EASY,
        time=25,
        image="https://images.unsplash.com/photo-1612874742237-6526221588e3?w=500&h=400&fit=crop",
        description="Classic Italian pasta dish with eggs, cheese, and pancetta. Creamy and delicious comfort food that comes together in minutes.",
    ),
    Recipe(
        id=2,
        title="Chicken Tikka Masala",
        category="curry",
        difficulty=Difficulty.MEDIUM,
        time=45,
        image="https://images.unsplash.com/photo-1565557623262-b51c2513a641?w=500&h=400&fit=crop",
        description="Rich and creamy Indian curry with tender chicken pieces. A restaurant favorite you can make at home with aromatic spices.",
    ),
    Recipe(
        id=3,
        title="Caesar Salad",
        category="salad",
        difficulty=Difficulty.EASY,
        time=15,
        image="https://images.unsplash.com/photo-1546793665-c74683f339c1?w=500&h=400&fit=crop",
        description="Crispy romaine lettuce with parmesan, croutons, and tangy Caesar dressing. Perfect as a side or light meal.",
    ),
    Recipe(
        id=4,
        title="Beef Wellington",
        category="main course",
        difficulty=Difficulty.HARD,
        time=120,
        image="https://images.unsplash.com/photo-1588168333986-5078d3ae3976?w=500&h=400&fit=crop",
        description="Elegant British dish with tender beef fillet wrapped in puff pastry. An impressive centerpiece for special occasions.",
    ),
    Recipe(
        id=5,
        title="Vegetable Stir Fry",
        category="asian",
        difficulty=Difficulty.EASY,
        time=20,
        image="https://images.unsplash.com/photo-1512058564366-18510be2db19?w=500&h=400&fit=crop",
        description="Quick and healthy mix of colorful vegetables with savory sauce. Customize with your favorite veggies and protein.",
    ),
    Recipe(
        id=6,
        title="Homemade Pizza Margherita",
        category="italian",
        difficulty=Difficulty.MEDIUM,
        time=60,
        image="https://images.unsplash.com/photo-1574071318508-1cdbab80d002?w=500&h=400&fit=crop",
        description="Fresh mozzarella, basil, and tomato sauce on homemade dough. The classic Italian pizza that started it all.",
    ),
    Recipe(
        id=7,
        title="Chocolate Lava Cake",
        category="dessert",
        difficulty=Difficulty.MEDIUM,
        time=30,
        image="https://images.unsplash.com/photo-1624353365286-3f8d62daad51?w=500&h=400&fit=crop",
        description="Decadent chocolate cake with a molten center. Serve warm with vanilla ice cream for the ultimate indulgence.",
    ),
    Recipe(
        id=8,
        title="Thai Green Curry",
        category="curry",
        difficulty=Difficulty.HARD,
        time=50,
        image="https://images.unsplash.com/photo-1455619452474-d2be8b1e70cd?w=500&h=400&fit=crop",
        description="Aromatic Thai curry with coconut milk and fresh herbs. Complex flavors balanced between spicy, sweet, and savory.",
    ),
)


def load_recipes(path: Path) -> tuple[Recipe, ...]:
    """Load a recipe catalog from a JSON file.

    Args:
        path: JSON file holding an array of recipe objects

    Returns:
        Tuple of Recipe in file order

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Recipe data not found: {path}")

    data = json.loads(path.read_text(encoding="utf-8"))
    return tuple(Recipe.from_dict(entry) for entry in data)


def get_recipes(path: Optional[Path] = None) -> tuple[Recipe, ...]:
    """Return the catalog from ``path``, or the built-in sample catalog."""
    if path:
        return load_recipes(path)
    return SAMPLE_RECIPES

from typing import Dict, List

# --- Dietary restrictions ---
# Maps loose user input to the canonical restriction tag
DIETARY_RESTRICTION_ALIASES: Dict[str, str] = {
    "vegetarian": "vegetarian",
    "vegan": "vegan",
    "glutenfree": "glutenFree",
    "gluten-free": "glutenFree",
    "gluten free": "glutenFree",
    "gluten_free": "glutenFree",
}

# Canonical restriction tag -> Recipe attribute that must be True
DIETARY_RESTRICTION_FLAGS: Dict[str, str] = {
    "vegetarian": "vegetarian",
    "vegan": "vegan",
    "glutenFree": "gluten_free",
}

# --- Skill level fit ---
# skill level -> complexity class -> score adjustment
SKILL_LEVEL_BONUS: Dict[str, Dict[str, int]] = {
    "beginner": {"easy": 10, "medium": 0, "hard": -10},
    "intermediate": {"easy": 5, "medium": 10, "hard": 5},
    "advanced": {"easy": 8, "medium": 8, "hard": 15},
}

# --- Complementary ingredients ---
# Base ingredient (matched as a substring of a fridge item) -> good pairings.
# Definition order is the suggestion order.
COMPLEMENTARY_INGREDIENTS: Dict[str, List[str]] = {
    "tomato": ["basil", "mozzarella", "garlic", "olive oil"],
    "chicken": ["rosemary", "thyme", "lemon", "garlic"],
    "pasta": ["parmesan", "basil", "garlic", "olive oil"],
    "rice": ["soy sauce", "ginger", "scallions", "sesame oil"],
    "beef": ["onion", "garlic", "worcestershire sauce", "mushrooms"],
    "salmon": ["dill", "lemon", "capers", "asparagus"],
    "potato": ["rosemary", "thyme", "garlic", "butter"],
    "avocado": ["lime", "cilantro", "jalapeño", "red onion"],
}

# --- Seasonal produce ---
SEASONAL_INGREDIENTS: Dict[str, List[str]] = {
    "winter": ["butternut squash", "sweet potato", "brussels sprouts", "cranberries", "pomegranate"],
    "spring": ["asparagus", "artichoke", "peas", "strawberries", "rhubarb"],
    "summer": ["tomatoes", "corn", "zucchini", "peaches", "berries"],
    "fall": ["pumpkin", "apples", "pears", "root vegetables", "persimmons"],
}

# Calendar month (1-12) -> season
SEASON_BY_MONTH: Dict[int, str] = {
    12: "winter", 1: "winter", 2: "winter",
    3: "spring", 4: "spring", 5: "spring",
    6: "summer", 7: "summer", 8: "summer",
    9: "fall", 10: "fall", 11: "fall",
}

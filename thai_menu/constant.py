"""Editable static menu, translation and story configuration."""

from __future__ import annotations

from typing import Any

_PROTEIN_CHOICES: list[dict[str, str]] = [
    {"label": "Chicken", "price_delta": "0.00"},
    {"label": "Tofu", "price_delta": "0.00"},
    {"label": "Beef", "price_delta": "2.00"},
    {"label": "Shrimp", "price_delta": "3.00"},
]

_SPICE_CHOICES: list[dict[str, str]] = [
    {"label": "Mild", "price_delta": "0.00"},
    {"label": "Medium", "price_delta": "0.00"},
    {"label": "Thai Hot", "price_delta": "0.00"},
]

# Category and item records consumed by thai_menu.data (which wraps these into frozen dataclasses).
MENU_CATEGORIES: list[dict[str, Any]] = [
    {
        "id": "starters",
        "name": "Starters",
        "description": "Small plates to share while you wait.",
        "items": [
            {
                "id": "thai-spring-rolls",
                "name": "Thai Spring Rolls",
                "description": "Crispy rolls of glass noodles, cabbage and carrot with sweet chili sauce.",
                "price": "7.50",
                "popular": True,
                "vegetarian": True,
                "protein": 6,
                "calories": 320,
                "allergens": ["gluten", "soy"],
            },
            {
                "id": "steamed-dumplings",
                "name": "Steamed Dumplings",
                "description": "Pork and shrimp dumplings with black vinegar dipping sauce.",
                "price": "8.95",
                "protein": 14,
                "calories": 380,
                "allergens": ["gluten", "shellfish", "soy"],
            },
            {
                "id": "chicken-satay",
                "name": "Chicken Satay",
                "description": "Turmeric grilled chicken skewers with peanut sauce and cucumber relish.",
                "price": "9.50",
                "gluten_free": True,
                "protein": 24,
                "calories": 410,
                "allergens": ["peanuts"],
            },
        ],
    },
    {
        "id": "soups",
        "name": "Soups",
        "description": "Simmered fresh every morning.",
        "items": [
            {
                "id": "tom-yum-goong",
                "name": "Tom Yum Goong",
                "description": "Hot and sour lemongrass broth with shrimp, mushroom and lime leaf.",
                "price": "8.50",
                "popular": True,
                "spicy": True,
                "gluten_free": True,
                "protein": 18,
                "calories": 210,
                "allergens": ["shellfish", "fish"],
            },
            {
                "id": "tom-kha-gai",
                "name": "Tom Kha Gai",
                "description": "Coconut galangal soup with chicken and mushrooms.",
                "price": "8.50",
                "gluten_free": True,
                "protein": 16,
                "calories": 340,
                "allergens": ["fish"],
            },
            {
                "id": "vegetable-clear-soup",
                "name": "Vegetable Clear Soup",
                "description": "Light broth with napa cabbage, tofu and glass noodles.",
                "price": "6.95",
                "vegetarian": True,
                "protein": 9,
                "calories": 150,
                "allergens": ["soy"],
            },
        ],
    },
    {
        "id": "curries",
        "name": "Curries",
        "description": "Served with jasmine rice.",
        "items": [
            {
                "id": "green-curry",
                "name": "Green Curry",
                "description": "Green chili coconut curry with Thai eggplant, bamboo shoots and basil.",
                "price": "15.95",
                "popular": True,
                "spicy": True,
                "gluten_free": True,
                "protein": 28,
                "calories": 620,
                "allergens": ["fish"],
                "sourcing": "Curry paste pounded in-house each morning from Thai green chilies.",
                "options": [{"name": "Protein", "required": True, "choices": _PROTEIN_CHOICES}],
            },
            {
                "id": "massaman-curry",
                "name": "Massaman Curry",
                "description": "Mild beef curry with potato, onion and roasted peanuts.",
                "price": "16.95",
                "gluten_free": True,
                "protein": 34,
                "calories": 720,
                "allergens": ["peanuts", "fish"],
            },
            {
                "id": "panang-tofu-curry",
                "name": "Panang Tofu Curry",
                "description": "Thick red curry with crispy tofu, kaffir lime and bell pepper.",
                "price": "14.50",
                "spicy": True,
                "vegetarian": True,
                "gluten_free": True,
                "protein": 19,
                "calories": 560,
                "allergens": ["soy"],
            },
        ],
    },
    {
        "id": "noodles",
        "name": "Noodles",
        "description": "Wok-tossed to order.",
        "items": [
            {
                "id": "pad-thai",
                "name": "Pad Thai",
                "description": "Rice noodles stir-fried with egg, tamarind, bean sprouts and crushed peanuts.",
                "price": "14.95",
                "popular": True,
                "protein": 26,
                "calories": 680,
                "allergens": ["peanuts", "eggs", "fish"],
                "sourcing": "Tamarind pulp imported from Phetchabun province.",
                "options": [
                    {"name": "Protein", "required": True, "choices": _PROTEIN_CHOICES},
                    {"name": "Spice Level", "required": False, "choices": _SPICE_CHOICES},
                ],
            },
            {
                "id": "pad-see-ew",
                "name": "Pad See Ew",
                "description": "Wide rice noodles with Chinese broccoli, egg and sweet soy.",
                "price": "12.00",
                "protein": 22,
                "calories": 640,
                "allergens": ["gluten", "eggs", "soy"],
            },
            {
                "id": "drunken-noodles",
                "name": "Drunken Noodles",
                "description": "Spicy wide noodles with holy basil, chili and beef.",
                "price": "14.50",
                "spicy": True,
                "protein": 31,
                "calories": 700,
                "allergens": ["gluten", "soy"],
            },
        ],
    },
    {
        "id": "rice-dishes",
        "name": "Rice Dishes",
        "description": "Jasmine rice from the wok.",
        "items": [
            {
                "id": "thai-fried-rice",
                "name": "Thai Fried Rice",
                "description": "Egg fried rice with onion, tomato and cucumber.",
                "price": "11.95",
                "protein": 20,
                "calories": 590,
                "allergens": ["eggs", "soy"],
                "options": [{"name": "Protein", "required": False, "choices": _PROTEIN_CHOICES}],
            },
            {
                "id": "pineapple-fried-rice",
                "name": "Pineapple Fried Rice",
                "description": "Curry-spiced rice with pineapple, cashews and raisins.",
                "price": "13.50",
                "vegetarian": True,
                "protein": 12,
                "calories": 610,
                "allergens": ["tree nuts", "soy"],
            },
            {
                "id": "basil-chicken-rice",
                "name": "Basil Chicken Rice",
                "description": "Minced chicken with holy basil and chili over rice, topped with a fried egg.",
                "price": "12.95",
                "spicy": True,
                "gluten_free": True,
                "protein": 33,
                "calories": 650,
                "allergens": ["eggs", "fish"],
            },
        ],
    },
    {
        "id": "signature-specials",
        "name": "Signature Specials",
        "description": "Chef Somchai's house favourites.",
        "items": [
            {
                "id": "crying-tiger",
                "name": "Crying Tiger",
                "description": "Grilled marinated flank steak with roasted rice chili dip.",
                "price": "22.00",
                "popular": True,
                "spicy": True,
                "gluten_free": True,
                "protein": 42,
                "calories": 540,
                "allergens": ["fish"],
                "sourcing": "Grass-fed beef from a family farm in upstate New York.",
            },
            {
                "id": "whole-fried-snapper",
                "name": "Whole Fried Snapper",
                "description": "Crispy red snapper with three-flavour tamarind chili sauce.",
                "price": "28.00",
                "gluten_free": True,
                "protein": 48,
                "calories": 780,
                "allergens": ["fish"],
            },
        ],
    },
    {
        "id": "desserts",
        "name": "Desserts",
        "items": [
            {
                "id": "mango-sticky-rice",
                "name": "Mango Sticky Rice",
                "description": "Sweet coconut sticky rice with ripe mango and toasted mung beans.",
                "price": "8.00",
                "popular": True,
                "vegetarian": True,
                "gluten_free": True,
                "protein": 5,
                "calories": 420,
            },
            {
                "id": "coconut-ice-cream",
                "name": "Coconut Ice Cream",
                "description": "House-churned coconut ice cream with peanuts and palm sugar.",
                "price": "6.50",
                "vegetarian": True,
                "gluten_free": True,
                "calories": 300,
                "allergens": ["peanuts"],
            },
        ],
    },
    {
        "id": "drinks",
        "name": "Drinks",
        "items": [
            {
                "id": "thai-iced-tea",
                "name": "Thai Iced Tea",
                "description": "Sweet spiced black tea with condensed milk.",
                "price": "4.50",
                "vegetarian": True,
                "gluten_free": True,
                "calories": 240,
                "allergens": ["dairy"],
            },
            {
                "id": "lemongrass-cooler",
                "name": "Lemongrass Cooler",
                "description": "Lemongrass, lime and soda over ice.",
                "price": "4.00",
                "vegetarian": True,
                "gluten_free": True,
                "calories": 90,
            },
        ],
    },
]

CATEGORY_TRANSLATIONS_ES: dict[str, str] = {
    "Starters": "Entrantes",
    "Soups": "Sopas",
    "Curries": "Curry",
    "Noodles": "Fideos",
    "Rice Dishes": "Platos de Arroz",
    "Signature Specials": "Especialidades",
    "Desserts": "Postres",
    "Drinks": "Bebidas",
}

SPANISH_MENU_GREETING = "¡Aquí está nuestro menú en español!"

# FAQ id -> suggested query shown under the search bar.
FAQ_SUGGESTIONS: dict[str, str] = {
    "popular": "What is the most popular dish?",
    "spicy": "Show me spicy dishes",
    "vegetarian": "I am vegetarian",
    "protein": "Which dish has the highest protein?",
    "gluten": "Show gluten-free options",
    "quick": "Quick lunch options",
}

DISH_STORIES: dict[str, str] = {
    "thai-spring-rolls": (
        "Handcrafted by our chef who learned the technique from his grandmother in Bangkok. "
        "These spring rolls quickly became a customer favorite when Thai Cookery first opened."
    ),
    "steamed-dumplings": (
        "Chef Somchai discovered this recipe during his travels through Northern Thailand's mountain villages "
        "and refined it over five years in New York."
    ),
    "pad-thai": (
        "Our Pad Thai recipe was passed down through three generations of the owner's family in Bangkok. "
        "It remains the signature dish that brings customers back again and again."
    ),
    "green-curry": (
        "Our Green Curry recipe originated in the kitchen of a small Bangkok street vendor. "
        "Each batch of curry paste is made fresh daily with a mortar and pestle."
    ),
}

DEFAULT_DISH_STORY = (
    "This dish represents Thai Cookery's dedication to authentic Thai cuisine with a modern New York twist. "
    "Our chef sources each ingredient to balance flavor and texture."
)

"""Default recipe catalogue and food bank directory."""

from __future__ import annotations

DEFAULT_RECIPES = [
    {
        "id": "1",
        "name": "Fresh Garden Salad",
        "description": "A refreshing salad with mixed vegetables and herbs",
        "ingredients": ["lettuce", "tomatoes", "cucumbers", "carrots", "onions", "olive oil", "lemon"],
        "instructions": [
            "Wash all vegetables thoroughly under cold running water",
            "Chop lettuce into bite-sized pieces and place in a large bowl",
            "Slice tomatoes and cucumbers into rounds",
            "Grate carrots using a coarse grater",
            "Thinly slice onions for a mild flavor",
            "Combine all vegetables in the bowl",
            "Drizzle with olive oil and fresh lemon juice",
            "Toss gently and season with salt and pepper to taste",
        ],
        "prep_time": 15,
        "cook_time": 0,
        "servings": 4,
        "category": "lunch",
        "cuisine": "Mediterranean",
        "dietary_restrictions": ["vegetarian", "vegan", "gluten-free"],
        "image_url": "https://images.pexels.com/photos/1640777/pexels-photo-1640777.jpeg",
    },
    {
        "id": "2",
        "name": "Vegetable Stir Fry",
        "description": "Quick and healthy stir fry with seasonal vegetables",
        "ingredients": [
            "broccoli",
            "carrots",
            "bell peppers",
            "onions",
            "garlic",
            "soy sauce",
            "ginger",
            "sesame oil",
        ],
        "instructions": [
            "Heat sesame oil in a large wok or pan over high heat",
            "Add minced garlic and ginger, cook for 30 seconds until fragrant",
            "Add harder vegetables first (carrots, broccoli stems)",
            "Stir fry for 3-4 minutes until slightly tender",
            "Add softer vegetables (bell peppers, broccoli florets, onions)",
            "Continue cooking for another 2-3 minutes",
            "Add soy sauce and toss to combine",
            "Cook for 1 more minute until vegetables are crisp-tender",
            "Serve immediately over rice or noodles",
        ],
        "prep_time": 10,
        "cook_time": 10,
        "servings": 3,
        "category": "dinner",
        "cuisine": "Asian",
        "dietary_restrictions": ["vegetarian", "vegan"],
        "image_url": "https://images.pexels.com/photos/2253643/pexels-photo-2253643.jpeg",
    },
    {
        "id": "3",
        "name": "Fruit Smoothie Bowl",
        "description": "Nutritious breakfast bowl with fresh fruits and toppings",
        "ingredients": ["bananas", "berries", "yogurt", "honey", "granola", "nuts", "chia seeds"],
        "instructions": [
            "Freeze bananas overnight for best texture",
            "Blend frozen bananas with yogurt until smooth and creamy",
            "Add a splash of milk if needed for consistency",
            "Pour smoothie mixture into a bowl",
            "Arrange fresh berries on top in rows",
            "Drizzle with honey in decorative patterns",
            "Sprinkle granola, nuts, and chia seeds",
            "Add any additional toppings as desired",
            "Serve immediately with a spoon",
        ],
        "prep_time": 10,
        "cook_time": 0,
        "servings": 1,
        "category": "breakfast",
        "cuisine": "American",
        "dietary_restrictions": ["vegetarian", "gluten-free"],
        "image_url": "https://images.pexels.com/photos/1640774/pexels-photo-1640774.jpeg",
    },
    {
        "id": "4",
        "name": "Banana Bread",
        "description": "Moist and delicious banana bread perfect for overripe bananas",
        "ingredients": [
            "bananas",
            "flour",
            "sugar",
            "eggs",
            "butter",
            "baking soda",
            "vanilla",
            "salt",
        ],
        "instructions": [
            "Preheat oven to 350°F (175°C)",
            "Mash overripe bananas in a large bowl",
            "Mix in melted butter, sugar, egg, and vanilla",
            "Combine flour, baking soda, and salt in separate bowl",
            "Gradually add dry ingredients to wet ingredients",
            "Mix until just combined, do not overmix",
            "Pour into greased loaf pan",
            "Bake for 60-65 minutes until golden brown",
            "Cool in pan for 10 minutes before removing",
        ],
        "prep_time": 15,
        "cook_time": 65,
        "servings": 8,
        "category": "snack",
        "cuisine": "American",
        "dietary_restrictions": ["vegetarian"],
        "image_url": "https://images.pexels.com/photos/830894/pexels-photo-830894.jpeg",
    },
]

DEFAULT_FOOD_BANKS = [
    {
        "id": "1",
        "name": "Feeding America - Central Food Bank",
        "address": "123 Main St, New York, NY 10001, USA",
        "phone": "+1 (555) 123-4567",
        "email": "contact@feedingamerica-central.org",
        "accepted_items": ["vegetables", "fruits", "canned", "grains", "dairy"],
        "operating_hours": "Mon-Fri: 8AM-6PM, Sat: 9AM-3PM",
        "website": "https://feedingamerica.org",
        "country": "United States",
        "city": "New York",
        "latitude": 40.7128,
        "longitude": -74.0060,
    },
    {
        "id": "2",
        "name": "Los Angeles Regional Food Bank",
        "address": "1734 E 41st St, Los Angeles, CA 90058, USA",
        "phone": "+1 (323) 234-3030",
        "email": "info@lafoodbank.org",
        "accepted_items": ["vegetables", "fruits", "dairy", "meats", "canned"],
        "operating_hours": "Mon-Thu: 7AM-4PM, Fri: 7AM-3PM",
        "website": "https://lafoodbank.org",
        "country": "United States",
        "city": "Los Angeles",
        "latitude": 34.0522,
        "longitude": -118.2437,
    },
    {
        "id": "3",
        "name": "The Trussell Trust - London",
        "address": "52 Camberwell Church St, London SE5 8QZ, UK",
        "phone": "+44 20 7394 5200",
        "email": "london@trusselltrust.org",
        "accepted_items": ["canned", "grains", "snacks", "beverages"],
        "operating_hours": "Mon-Fri: 9AM-5PM, Sat: 10AM-2PM",
        "website": "https://trusselltrust.org",
        "country": "United Kingdom",
        "city": "London",
        "latitude": 51.5074,
        "longitude": -0.1278,
    },
    {
        "id": "4",
        "name": "FareShare Manchester",
        "address": "Unit 9, Guinness Rd, Manchester M17 1SD, UK",
        "phone": "+44 161 888 1003",
        "email": "manchester@fareshare.org.uk",
        "accepted_items": ["vegetables", "fruits", "dairy", "meats", "frozen"],
        "operating_hours": "Mon-Fri: 8AM-4PM",
        "website": "https://fareshare.org.uk",
        "country": "United Kingdom",
        "city": "Manchester",
        "latitude": 53.4808,
        "longitude": -2.2426,
    },
    {
        "id": "5",
        "name": "Food Banks Canada - Toronto",
        "address": "5025 Orbitor Dr, Mississauga, ON L4W 4Y5, Canada",
        "phone": "+1 (905) 602-5234",
        "email": "toronto@foodbankscanada.ca",
        "accepted_items": ["vegetables", "fruits", "canned", "grains", "dairy"],
        "operating_hours": "Mon-Fri: 9AM-5PM, Sat: 10AM-2PM",
        "website": "https://foodbankscanada.ca",
        "country": "Canada",
        "city": "Toronto",
        "latitude": 43.6532,
        "longitude": -79.3832,
    },
    {
        "id": "6",
        "name": "Foodbank Australia - Sydney",
        "address": "50 Owen St, Glendenning NSW 2761, Australia",
        "phone": "+61 2 9756 3099",
        "email": "sydney@foodbank.org.au",
        "accepted_items": ["vegetables", "fruits", "canned", "grains", "snacks"],
        "operating_hours": "Mon-Fri: 8AM-4PM",
        "website": "https://foodbank.org.au",
        "country": "Australia",
        "city": "Sydney",
        "latitude": -33.8688,
        "longitude": 151.2093,
    },
    {
        "id": "7",
        "name": "Berliner Tafel e.V.",
        "address": "Beusselstraße 44 N-Q, 10553 Berlin, Germany",
        "phone": "+49 30 68815200",
        "email": "info@berliner-tafel.de",
        "accepted_items": ["vegetables", "fruits", "dairy", "meats", "canned"],
        "operating_hours": "Mon-Fri: 8AM-6PM, Sat: 9AM-1PM",
        "website": "https://berliner-tafel.de",
        "country": "Germany",
        "city": "Berlin",
        "latitude": 52.5200,
        "longitude": 13.4050,
    },
    {
        "id": "8",
        "name": "Banques Alimentaires - Paris",
        "address": "21 Rue de Stalingrad, 92000 Nanterre, France",
        "phone": "+33 1 47 24 30 30",
        "email": "paris@banquealimentaire.org",
        "accepted_items": ["vegetables", "fruits", "canned", "grains", "dairy"],
        "operating_hours": "Lun-Ven: 9h-17h, Sam: 9h-13h",
        "website": "https://banquealimentaire.org",
        "country": "France",
        "city": "Paris",
        "latitude": 48.8566,
        "longitude": 2.3522,
    },
    {
        "id": "9",
        "name": "Second Harvest Japan - Tokyo",
        "address": "2-2-12 Osaki, Shinagawa-ku, Tokyo 141-0032, Japan",
        "phone": "+81 3-5728-3373",
        "email": "info@2hj.org",
        "accepted_items": ["vegetables", "fruits", "canned", "grains"],
        "operating_hours": "Mon-Fri: 9AM-6PM",
        "website": "https://2hj.org",
        "country": "Japan",
        "city": "Tokyo",
        "latitude": 35.6762,
        "longitude": 139.6503,
    },
    {
        "id": "10",
        "name": "Banco de Alimentos - São Paulo",
        "address": "Rua Voluntários da Pátria, 547, São Paulo, SP 02010-000, Brazil",
        "phone": "+55 11 3225-0055",
        "email": "contato@bancodealimentos.org.br",
        "accepted_items": ["vegetables", "fruits", "grains", "canned"],
        "operating_hours": "Seg-Sex: 8h-17h, Sáb: 8h-12h",
        "website": "https://bancodealimentos.org.br",
        "country": "Brazil",
        "city": "São Paulo",
        "latitude": -23.5505,
        "longitude": -46.6333,
    },
    {
        "id": "11",
        "name": "Feeding India - Mumbai",
        "address": "Andheri East, Mumbai, Maharashtra 400069, India",
        "phone": "+91 22 6789 1234",
        "email": "mumbai@feedingindia.org",
        "accepted_items": ["vegetables", "fruits", "grains", "canned"],
        "operating_hours": "Mon-Sat: 9AM-6PM",
        "website": "https://feedingindia.org",
        "country": "India",
        "city": "Mumbai",
        "latitude": 19.0760,
        "longitude": 72.8777,
    },
    {
        "id": "12",
        "name": "FoodForward SA - Cape Town",
        "address": "7 Voortrekker Rd, Goodwood, Cape Town, 7460, South Africa",
        "phone": "+27 21 447 8444",
        "email": "capetown@foodforwardsa.org",
        "accepted_items": ["vegetables", "fruits", "canned", "grains"],
        "operating_hours": "Mon-Fri: 8AM-5PM",
        "website": "https://foodforwardsa.org",
        "country": "South Africa",
        "city": "Cape Town",
        "latitude": -33.9249,
        "longitude": 18.4241,
    },
]

__all__ = ["DEFAULT_FOOD_BANKS", "DEFAULT_RECIPES"]

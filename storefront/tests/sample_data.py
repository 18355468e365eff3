"""Catalog and users loaded by the ``seeded_db`` fixture."""

TEST_CATALOG = [
    {"id": 1, "name": "Blue Widget", "price": 10.0, "category": "tools",
     "description": "A sturdy widget", "stock": 5},
    {"id": 2, "name": "Red Gadget", "price": 25.5, "category": "electronics",
     "description": "Blinks when shaken", "stock": 0},
    {"id": 3, "name": "Garden Hose", "price": 15.0, "category": "outdoor",
     "description": "Twenty metres of 50% recycled rubber", "stock": 3},
    {"id": 7, "name": "Trekking Poles", "price": 44.0, "category": "gear",
     "description": "Collapsible 3/4 aluminium poles", "stock": 1},
]

ALICE = {"username": "alice", "email": "alice@mail.com", "password": "Str0ng!Pass"}
BOB = {"username": "bob", "email": "bob@mail.com", "password": "An0ther#Pass"}

import random
from urllib.parse import quote

from .database import create_tables, session_scope
from .models import Branch, Floor, Item, Rack, UserRole
from . import catalog
from ..utils.logger import get_logger

logger = get_logger()

FLOOR_NAMES = ["Ground Floor", "1st Floor", "2nd Floor", "3rd Floor"]
RACK_CATEGORIES = [
    ["Vegetables", "Fruits", "Spices", "Rice & Grains"],
    ["Snacks", "Chocolates", "Soft Drinks", "Milk Products"],
    ["Soaps", "Cosmetics", "Baby Care", "Cleaning"],
    ["Stationery", "Non-veg", "Oils", "Miscellaneous"],
]

SAMPLE_ITEMS = {
    "Vegetables": [("Tomato", 30), ("Potato", 20), ("Onion", 25), ("Carrot", 35), ("Cabbage", 15),
                   ("Broccoli", 50), ("Spinach", 28), ("Bell Pepper", 45), ("Cauliflower", 40), ("Cucumber", 22)],
    "Fruits": [("Apple", 80), ("Banana", 40), ("Orange", 60), ("Mango", 100), ("Grapes", 120),
               ("Watermelon", 80), ("Pineapple", 90), ("Papaya", 50), ("Lemon", 35), ("Guava", 55)],
    "Spices": [("Turmeric Powder", 200), ("Chilli Powder", 150), ("Garam Masala", 250), ("Sugar", 40), ("Salt", 20),
               ("Cumin Seeds", 180), ("Black Pepper", 220), ("Coriander Powder", 120), ("Cardamom", 400),
               ("Fenugreek", 180)],
    "Rice & Grains": [("Basmati Rice", 300), ("Sona Masoori Rice", 250), ("Wheat Flour", 60), ("Oats", 120),
                      ("Corn Flakes", 180), ("Brown Rice", 220), ("Ragi Flour", 90), ("Chickpea Flour", 110),
                      ("Millet", 150), ("Semolina", 70)],
    "Snacks": [("Lays Chips", 35), ("Kurkure", 20), ("Pringles", 100), ("Biscuits", 50), ("Nachos", 60),
               ("Cheetos", 30), ("Mixed Nuts", 280), ("Popcorn", 40), ("Wafers", 55), ("Granola Bars", 80)],
    "Chocolates": [("Dairy Milk", 70), ("KitKat", 50), ("Munch", 15), ("Snickers", 60), ("5 Star", 25),
                   ("Toblerone", 100), ("Cadbury Silk", 120), ("Ferrero Rocher", 150), ("Bounty", 40),
                   ("Mars Bar", 45)],
    "Soft Drinks": [("Coca Cola", 50), ("Sprite", 50), ("Pepsi", 50), ("Fanta", 50), ("Mountain Dew", 50),
                    ("Thums Up", 50), ("7UP", 50), ("Limca", 50), ("Orange Juice", 70), ("Apple Juice", 80)],
    "Milk Products": [("Fresh Milk", 50), ("Curd", 60), ("Butter", 400), ("Cheese", 350), ("Paneer", 300),
                      ("Ghee", 500), ("Ice Cream", 120), ("Yogurt", 80), ("Condensed Milk", 150),
                      ("Evaporated Milk", 130)],
    "Soaps": [("Dove Soap", 60), ("Lux Soap", 40), ("Dettol Soap", 50), ("Lifebuoy Soap", 35), ("Pears Soap", 70),
              ("Cinthol Soap", 45), ("Medimix Soap", 55), ("Neem Soap", 50), ("Sandal Soap", 65),
              ("Aloe Vera Soap", 55)],
    "Cosmetics": [("Shampoo", 150), ("Conditioner", 180), ("Face Cream", 350), ("Body Lotion", 250),
                  ("Sunscreen", 400), ("Face Wash", 200), ("Moisturizer", 320), ("Deodorant", 280),
                  ("Hair Oil", 220), ("Lip Balm", 100)],
    "Baby Care": [("Baby Diapers", 600), ("Baby Powder", 150), ("Baby Oil", 200), ("Baby Wipes", 250),
                  ("Baby Lotion", 280), ("Baby Soap", 180), ("Baby Shampoo", 220), ("Feeding Bottle", 350),
                  ("Baby Food", 200), ("Baby Cereal", 180)],
    "Cleaning": [("Floor Cleaner", 120), ("Dish Soap", 80), ("Toilet Cleaner", 100), ("Glass Cleaner", 140),
                 ("Mop", 350), ("Broom", 150), ("Air Freshener", 200), ("Detergent Powder", 250), ("Bleach", 120),
                 ("Disinfectant", 180)],
    "Stationery": [("Notebook", 50), ("Pens Pack", 80), ("Pencils Pack", 40), ("Eraser", 15), ("Ruler", 30),
                   ("Sticky Notes", 35), ("Pencil Box", 120), ("School Bag", 800), ("Copy", 100),
                   ("Highlighter Pen", 60)],
    "Non-veg": [("Eggs (Dozen)", 100), ("Chicken", 250), ("Fish", 300), ("Mutton", 450), ("Prawns", 500),
                ("Chicken Breast", 280), ("Salmon Fish", 420), ("Shrimp", 550), ("Turkey", 400), ("Duck", 380)],
    "Oils": [("Sunflower Oil", 200), ("Groundnut Oil", 250), ("Coconut Oil", 280), ("Olive Oil", 600),
             ("Mustard Oil", 180), ("Vegetable Oil", 220), ("Sesame Oil", 350), ("Rice Bran Oil", 320),
             ("Canola Oil", 200), ("Soybean Oil", 210)],
    "Miscellaneous": [("Tissue Paper", 40), ("Garbage Bags", 60), ("Aluminum Foil", 80), ("Cling Wrap", 70),
                      ("Paper Cups", 50), ("Plastic Containers", 90), ("Matches Box", 15), ("Candles", 120),
                      ("Lightbulb", 80), ("Batteries", 150)],
}

SEED = 2024


def image_url_for(name: str) -> str:
    slug = quote(name.lower().replace(" ", "-"))
    return f"https://picsum.photos/seed/{slug}/400/400"

def _stock_branch(db, branch: Branch, rng: random.Random):
    for number, floor_name in enumerate(FLOOR_NAMES):
        floor = Floor(branch_id=branch.id, name=floor_name, floor_number=number)
        db.add(floor)
        db.flush()
        for index, category in enumerate(RACK_CATEGORIES[number]):
            rack = Rack(floor_id=floor.id, name=f"Rack {index + 1}", category=category)
            db.add(rack)
            db.flush()
            for name, price in SAMPLE_ITEMS.get(category, []):
                db.add(Item(
                    name=name,
                    description=f"Fresh {name}",
                    category=category,
                    price=float(price),
                    discount=rng.randrange(25),
                    rack_id=rack.id,
                    image_url=image_url_for(name),
                    stock=50 + rng.randrange(100),
                ))
    db.commit()

def seed_database(db) -> bool:
    """Populate an empty database with two stocked branches and their staff.

    Returns False without touching anything when branches already exist.
    """
    if db.query(Branch).count() > 0:
        logger.info("[SEED] Branches table is not empty. Skipping population.")
        return False

    logger.info("[SEED] Seeding database with multi-branch data...")
    rng = random.Random(SEED)

    catalog.create_user(db, username="admin", password="admin123", role=UserRole.hq_admin,
                        name="HQ Administrator", email="admin@grocery.com")

    main_branch = catalog.create_branch(db, "Main Store - Downtown", "123 Main Street, Downtown", is_main_branch=True)
    catalog.create_manager(db, "manager1", "manager123", main_branch.id, name="John Manager")

    north_branch = catalog.create_branch(db, "North Side Store", "456 North Avenue", is_main_branch=False)
    catalog.create_manager(db, "manager2", "manager123", north_branch.id, name="Jane Manager")

    for branch in (main_branch, north_branch):
        _stock_branch(db, branch, rng)

    logger.info("[SEED] Seeding complete!")
    return True

def populate():
    """Create tables and seed them when empty."""
    create_tables()

    with session_scope() as db:
        seed_database(db)

if __name__ == "__main__":
    populate()

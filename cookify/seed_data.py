"""Seed sample categories and recipes."""

import logging

from sqlalchemy.orm import Session

from cookify.models.category import Category
from cookify.models.localized_text import LocalizedText
from cookify.models.recipe import Recipe

logger = logging.getLogger(__name__)


def _pairs(*rows):
    return [LocalizedText(english=en, vietnamese=vi) for en, vi in rows]


CATEGORIES = [
    {"name": ("Appetizers", "Món khai vị"), "image_file_name": "appetizers.jpg"},
    {"name": ("Main Courses", "Món chính"), "image_file_name": "main-courses.jpg"},
    {"name": ("Desserts", "Món tráng miệng"), "image_file_name": "desserts.jpg"},
    {"name": ("Beverages", "Đồ uống"), "image_file_name": "beverages.jpg"},
]

# Keyed by the English name of the category each recipe belongs to
RECIPES = [
    {
        "category": "Appetizers",
        "name": ("Spring Rolls", "Chả giò"),
        "description": (
            "Crispy Vietnamese spring rolls with fresh vegetables",
            "Chả giò giòn rụm với rau củ tươi ngon",
        ),
        "prep_time": "10 minutes",
        "cook_time": "10 minutes",
        "image_file_name": "spring-rolls.jpg",
        "ingredients": _pairs(
            ("Rice paper", "Bánh tráng"),
            ("Lettuce", "Xà lách"),
            ("Carrot", "Cà rốt"),
            ("Cucumber", "Dưa chuột"),
            ("Mint leaves", "Lá bạc hà"),
            ("Dipping sauce", "Nước chấm"),
        ),
        "instructions": _pairs(
            ("Soak rice paper in warm water", "Nhúng bánh tráng vào nước ấm"),
            ("Add lettuce and vegetables", "Thêm xà lách và rau củ"),
            ("Roll tightly", "Cuốn chặt"),
            ("Serve with dipping sauce", "Ăn kèm với nước chấm"),
        ),
    },
    {
        "category": "Main Courses",
        "name": ("Beef Pho", "Phở bò"),
        "description": (
            "Traditional Vietnamese beef noodle soup",
            "Món phở bò truyền thống Việt Nam",
        ),
        "prep_time": "30 minutes",
        "cook_time": "6 hours",
        "image_file_name": "beef-pho.jpg",
        "ingredients": _pairs(
            ("Beef bones", "Xương bò"),
            ("Rice noodles", "Bánh phở"),
            ("Beef slices", "Thịt bò thái lát"),
            ("Onion", "Hành tây"),
            ("Star anise", "Hoa hồi"),
            ("Cinnamon", "Quế"),
            ("Fish sauce", "Nước mắm"),
            ("Bean sprouts", "Giá đỗ"),
            ("Herbs", "Rau thơm"),
        ),
        "instructions": _pairs(
            ("Simmer beef bones for 6 hours", "Ninh xương bò trong 6 tiếng"),
            ("Add spices and seasonings", "Thêm gia vị và nêm nếm"),
            ("Cook rice noodles separately", "Luộc bánh phở riêng"),
            ("Assemble bowl with noodles and beef", "Xếp bánh phở và thịt bò vào tô"),
            ("Pour hot broth over", "Rót nước dùng nóng"),
            ("Garnish with herbs and bean sprouts", "Ăn kèm rau thơm và giá đỗ"),
        ),
    },
    {
        "category": "Desserts",
        "name": ("Mango Sticky Rice", "Xôi xoài"),
        "description": (
            "Sweet sticky rice with fresh mango and coconut milk",
            "Xôi ngọt với xoài tươi và nước cốt dừa",
        ),
        "prep_time": "15 minutes",
        "cook_time": "30 minutes",
        "image_file_name": "mango-sticky-rice.jpg",
        "ingredients": _pairs(
            ("Glutinous rice", "Gạo nếp"),
            ("Coconut milk", "Nước cốt dừa"),
            ("Sugar", "Đường"),
            ("Salt", "Muối"),
            ("Fresh mango", "Xoài tươi"),
            ("Toasted sesame seeds", "Mè rang"),
        ),
        "instructions": _pairs(
            ("Soak glutinous rice overnight", "Ngâm gạo nếp qua đêm"),
            ("Steam rice until tender", "Hấp gạo cho đến khi mềm"),
            (
                "Mix coconut milk with sugar and salt",
                "Pha nước cốt dừa với đường và muối",
            ),
            ("Pour over steamed rice", "Rưới lên xôi"),
            ("Serve with sliced mango", "Ăn kèm với xoài thái lát"),
            ("Sprinkle with sesame seeds", "Rắc mè rang lên trên"),
        ),
    },
    {
        "category": "Beverages",
        "name": ("Vietnamese Iced Coffee", "Cà phê sữa đá"),
        "description": (
            "Strong coffee with sweetened condensed milk over ice",
            "Cà phê đậm đà với sữa đặc có đường và đá",
        ),
        "prep_time": "5 minutes",
        "cook_time": "5 minutes",
        "image_file_name": "vietnamese-iced-coffee.jpg",
        "ingredients": _pairs(
            ("Vietnamese coffee grounds", "Bột cà phê Việt Nam"),
            ("Sweetened condensed milk", "Sữa đặc có đường"),
            ("Hot water", "Nước nóng"),
            ("Ice cubes", "Đá viên"),
        ),
        "instructions": _pairs(
            ("Add condensed milk to glass", "Cho sữa đặc vào ly"),
            ("Place Vietnamese coffee filter on top", "Đặt phin cà phê lên trên"),
            ("Add coffee grounds to filter", "Cho bột cà phê vào phin"),
            ("Pour hot water slowly", "Rót nước nóng từ từ"),
            ("Let coffee drip", "Chờ cà phê nhỏ giọt"),
            ("Stir and add ice", "Khuấy đều và cho đá"),
        ),
    },
]


def seed_catalog(db: Session) -> bool:
    """
    Seed the sample catalog into an empty database.

    Returns:
        True if data was inserted, False if categories already existed
    """
    existing = db.query(Category).count()
    if existing > 0:
        logger.info("Catalog already seeded (%d categories). Skipping.", existing)
        return False

    by_name = {}
    for data in CATEGORIES:
        english, vietnamese = data["name"]
        category = Category(
            name=LocalizedText(english=english, vietnamese=vietnamese),
            image_file_name=data["image_file_name"],
        )
        db.add(category)
        by_name[english] = category
    db.flush()

    for data in RECIPES:
        db.add(
            Recipe(
                category_id=by_name[data["category"]].id,
                name=LocalizedText.create(*data["name"]),
                description=LocalizedText.create(*data["description"]),
                prep_time=data["prep_time"],
                cook_time=data["cook_time"],
                image_file_name=data["image_file_name"],
                ingredients=list(data["ingredients"]),
                instructions=list(data["instructions"]),
            )
        )

    db.commit()
    logger.info("Seeded %d categories and %d recipes", len(CATEGORIES), len(RECIPES))
    return True

"""Sample product catalog used for seeding.

Entries are plain dicts so they read like fixtures; load_sample_products()
validates every one of them through ProductInput before use.
"""

from typing import Any

from catalog_service.catalog.schemas import ProductInput

SAMPLE_PRODUCTS: list[dict[str, Any]] = [
    # Laptops
    {
        "name": "MacBook Pro 16-inch M3 Pro",
        "description": (
            "Apple's most powerful laptop with M3 Pro chip, featuring exceptional "
            "performance for professional workflows, stunning 16-inch Liquid Retina "
            "XDR display, and all-day battery life."
        ),
        "price": 2499,
        "original_price": 2699,
        "category": "laptops",
        "subcategory": "premium",
        "brand": "Apple",
        "model": "MacBook Pro 16",
        "rating": 4.8,
        "review_count": 1247,
        "specifications": {
            "processor": "Apple M3 Pro chip",
            "memory": "18GB Unified Memory",
            "storage": "512GB SSD",
            "display_size": "16-inch",
            "battery": "Up to 22 hours",
            "operating_system": "macOS",
            "weight": "2.16 kg",
            "color": "space gray",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1517336714731-489689fd1ca8?w=800",
                "alt": "MacBook Pro 16-inch front view",
                "is_primary": True,
            }
        ],
        "stock": 25,
        "is_featured": True,
        "tags": ["professional", "creative", "programming", "video-editing"],
    },
    {
        "name": "Dell XPS 13 Developer Edition",
        "description": (
            "Ultra-portable laptop with Ubuntu pre-installed, perfect for developers "
            "and professionals who need powerful performance in a compact form factor."
        ),
        "price": 1299,
        "original_price": 1499,
        "category": "laptops",
        "subcategory": "ultrabook",
        "brand": "Dell",
        "model": "XPS 13",
        "rating": 4.6,
        "review_count": 892,
        "specifications": {
            "processor": "Intel Core i7-1360P",
            "memory": "16GB LPDDR5",
            "storage": "512GB SSD",
            "display_size": "13.4-inch",
            "battery": "Up to 12 hours",
            "operating_system": "Ubuntu 22.04 LTS",
            "weight": "1.24 kg",
            "color": "platinum silver",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1588872657578-7efd1f1555ed?w=800",
                "alt": "Dell XPS 13 laptop",
                "is_primary": True,
            }
        ],
        "stock": 18,
        "is_featured": True,
        "tags": ["developer", "linux", "ultraportable", "business"],
    },
    {
        "name": "Lenovo ThinkPad X1 Carbon Gen 11",
        "description": (
            "Business-grade ultrabook with military-grade durability, exceptional "
            "keyboard, and enterprise security features. Perfect for professionals "
            "on the go."
        ),
        "price": 1899,
        "category": "laptops",
        "subcategory": "business",
        "brand": "Lenovo",
        "model": "ThinkPad X1 Carbon",
        "rating": 4.7,
        "review_count": 634,
        "specifications": {
            "processor": "Intel Core i7-1355U",
            "memory": "16GB LPDDR5",
            "storage": "1TB SSD",
            "display_size": "14-inch",
            "battery": "Up to 15 hours",
            "operating_system": "Windows 11 Pro",
            "weight": "1.12 kg",
            "color": "black",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1541807084-5c52b6b3adef?w=800",
                "alt": "Lenovo ThinkPad laptop",
                "is_primary": True,
            }
        ],
        "stock": 12,
        "tags": ["business", "durable", "security", "enterprise"],
    },
    {
        "name": "ASUS Zenbook 14 OLED",
        "description": (
            "Lightweight 14-inch laptop with a vivid OLED display, long battery life "
            "and a slim aluminum chassis for students and everyday work."
        ),
        "price": 899,
        "original_price": 999,
        "category": "laptops",
        "subcategory": "ultrabook",
        "brand": "ASUS",
        "model": "Zenbook 14",
        "rating": 4.4,
        "review_count": 418,
        "specifications": {
            "processor": "Intel Core Ultra 5 125H",
            "memory": "16GB LPDDR5X",
            "storage": "512GB SSD",
            "display_size": "14-inch",
            "battery": "Up to 14 hours",
            "operating_system": "Windows 11 Home",
            "weight": "1.2 kg",
            "color": "ponder blue",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1496181133206-80ce9b88a853?w=800",
                "alt": "ASUS Zenbook 14 OLED",
            }
        ],
        "stock": 30,
        "tags": ["student", "oled", "ultraportable"],
    },
    # Smartphones
    {
        "name": "iPhone 15 Pro Max",
        "description": (
            "Apple's flagship smartphone with titanium design, A17 Pro chip, advanced "
            "camera system with 5x optical zoom, and USB-C connectivity."
        ),
        "price": 1199,
        "category": "smartphones",
        "subcategory": "flagship",
        "brand": "Apple",
        "model": "iPhone 15 Pro Max",
        "rating": 4.9,
        "review_count": 2156,
        "specifications": {
            "processor": "A17 Pro chip",
            "memory": "8GB",
            "storage": "256GB",
            "display_size": "6.7-inch",
            "battery": "Up to 29 hours video playback",
            "operating_system": "iOS 17",
            "weight": "221g",
            "color": "natural titanium",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1592750475338-74b7b21085ab?w=800",
                "alt": "iPhone 15 Pro Max",
                "is_primary": True,
            }
        ],
        "stock": 40,
        "is_featured": True,
        "tags": ["flagship", "camera", "ios", "5g"],
    },
    {
        "name": "Samsung Galaxy S24 Ultra",
        "description": (
            "Samsung's premium Android phone with built-in S Pen, 200MP camera, "
            "and AI-powered photo and productivity features."
        ),
        "price": 1299,
        "original_price": 1419,
        "category": "smartphones",
        "subcategory": "flagship",
        "brand": "Samsung",
        "model": "Galaxy S24 Ultra",
        "rating": 4.7,
        "review_count": 1532,
        "specifications": {
            "processor": "Snapdragon 8 Gen 3",
            "memory": "12GB",
            "storage": "256GB",
            "display_size": "6.8-inch",
            "battery": "5000mAh",
            "operating_system": "Android 14",
            "weight": "232g",
            "color": "titanium black",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1610945415295-d9bbf067e59c?w=800",
                "alt": "Samsung Galaxy S24 Ultra",
                "is_primary": True,
            }
        ],
        "stock": 35,
        "tags": ["android", "stylus", "camera", "5g"],
    },
    {
        "name": "Google Pixel 8a",
        "description": (
            "Affordable Google phone with the Tensor G3 chip, excellent computational "
            "photography and seven years of OS updates."
        ),
        "price": 499,
        "category": "smartphones",
        "subcategory": "midrange",
        "brand": "Google",
        "model": "Pixel 8a",
        "rating": 4.5,
        "review_count": 687,
        "specifications": {
            "processor": "Google Tensor G3",
            "memory": "8GB",
            "storage": "128GB",
            "display_size": "6.1-inch",
            "battery": "4492mAh",
            "operating_system": "Android 14",
            "weight": "188g",
            "color": "bay",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1598327105666-5b89351aff97?w=800",
                "alt": "Google Pixel 8a",
                "is_primary": True,
            }
        ],
        "stock": 0,
        "tags": ["android", "budget", "camera"],
    },
    # Headphones
    {
        "name": "Sony WH-1000XM5 Wireless Headphones",
        "description": (
            "Industry-leading noise canceling headphones with exceptional sound "
            "quality, 30-hour battery life, and crystal-clear hands-free calling."
        ),
        "price": 349,
        "original_price": 399,
        "category": "headphones",
        "subcategory": "over-ear",
        "brand": "Sony",
        "model": "WH-1000XM5",
        "rating": 4.7,
        "review_count": 3421,
        "specifications": {
            "battery": "Up to 30 hours",
            "weight": "250g",
            "color": "black",
            "warranty": "1 year",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1618366712010-f4ae9c647dcb?w=800",
                "alt": "Sony WH-1000XM5 headphones",
                "is_primary": True,
            }
        ],
        "stock": 60,
        "is_featured": True,
        "tags": ["noise-canceling", "wireless", "travel", "bluetooth"],
    },
    {
        "name": "Apple AirPods Pro (2nd generation)",
        "description": (
            "Wireless earbuds with active noise cancellation, adaptive audio, "
            "personalized spatial audio and a USB-C MagSafe charging case."
        ),
        "price": 249,
        "category": "headphones",
        "subcategory": "earbuds",
        "brand": "Apple",
        "model": "AirPods Pro 2",
        "rating": 4.8,
        "review_count": 5210,
        "specifications": {
            "battery": "Up to 6 hours (30 hours with case)",
            "weight": "5.3g per earbud",
            "color": "white",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1600294037681-c80b4cb5b434?w=800",
                "alt": "AirPods Pro",
                "is_primary": True,
            }
        ],
        "stock": 120,
        "tags": ["wireless", "earbuds", "noise-canceling", "ios"],
    },
    # Tablets
    {
        "name": "iPad Air 11-inch M2",
        "description": (
            "Thin and light tablet powered by the M2 chip with a Liquid Retina "
            "display, Apple Pencil Pro support and all-day battery life."
        ),
        "price": 599,
        "category": "tablets",
        "brand": "Apple",
        "model": "iPad Air 11",
        "rating": 4.7,
        "review_count": 954,
        "specifications": {
            "processor": "Apple M2 chip",
            "storage": "128GB",
            "display_size": "11-inch",
            "battery": "Up to 10 hours",
            "operating_system": "iPadOS 17",
            "weight": "462g",
            "color": "starlight",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1544244015-0df4b3ffc6b0?w=800",
                "alt": "iPad Air",
                "is_primary": True,
            }
        ],
        "stock": 22,
        "tags": ["tablet", "drawing", "ios"],
    },
    # Cameras
    {
        "name": "Canon EOS R6 Mark II",
        "description": (
            "Full-frame mirrorless camera with 24.2MP sensor, in-body image "
            "stabilization and 4K60 video for hybrid shooters."
        ),
        "price": 2299,
        "original_price": 2499,
        "category": "cameras",
        "subcategory": "mirrorless",
        "brand": "Canon",
        "model": "EOS R6 Mark II",
        "rating": 4.8,
        "review_count": 312,
        "specifications": {
            "weight": "670g",
            "dimensions": "138.4 x 98.4 x 88.4 mm",
            "color": "black",
            "warranty": "1 year",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1516035069371-29a1b244cc32?w=800",
                "alt": "Canon mirrorless camera",
                "is_primary": True,
            }
        ],
        "stock": 7,
        "tags": ["photography", "mirrorless", "video", "full-frame"],
    },
    # Gaming
    {
        "name": "Nintendo Switch OLED Model",
        "description": (
            "Hybrid handheld and home console with a vibrant 7-inch OLED screen, "
            "wide adjustable stand and enhanced audio."
        ),
        "price": 349,
        "category": "gaming",
        "subcategory": "consoles",
        "brand": "Nintendo",
        "model": "Switch OLED",
        "rating": 4.8,
        "review_count": 4102,
        "specifications": {
            "storage": "64GB",
            "display_size": "7-inch",
            "battery": "4.5 to 9 hours",
            "weight": "420g",
            "color": "white",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1578303512597-81e6cc155b3e?w=800",
                "alt": "Nintendo Switch OLED",
                "is_primary": True,
            }
        ],
        "stock": 45,
        "is_featured": True,
        "tags": ["console", "handheld", "family"],
    },
    # Accessories
    {
        "name": "Logitech MX Master 3S Wireless Mouse",
        "description": (
            "Ergonomic performance mouse with quiet clicks, 8K DPI tracking on any "
            "surface and MagSpeed electromagnetic scrolling."
        ),
        "price": 99,
        "category": "accessories",
        "subcategory": "input-devices",
        "brand": "Logitech",
        "model": "MX Master 3S",
        "rating": 4.6,
        "review_count": 2875,
        "specifications": {
            "battery": "Up to 70 days",
            "weight": "141g",
            "color": "graphite",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1527864550417-7fd91fc51a46?w=800",
                "alt": "Logitech MX Master mouse",
                "is_primary": True,
            }
        ],
        "stock": 80,
        "tags": ["mouse", "wireless", "ergonomic", "productivity"],
    },
    # Home & kitchen
    {
        "name": "Dyson V15 Detect Cordless Vacuum",
        "description": (
            "Powerful cordless stick vacuum with laser dust detection, piezo "
            "particle counting and up to 60 minutes of run time."
        ),
        "price": 749,
        "original_price": 849,
        "category": "home",
        "subcategory": "cleaning",
        "brand": "Dyson",
        "model": "V15 Detect",
        "rating": 4.6,
        "review_count": 1189,
        "specifications": {
            "battery": "Up to 60 minutes",
            "weight": "3.1 kg",
            "color": "yellow/nickel",
            "warranty": "2 years",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1558317374-067fb5f30001?w=800",
                "alt": "Dyson cordless vacuum",
                "is_primary": True,
            }
        ],
        "stock": 15,
        "tags": ["vacuum", "cordless", "cleaning"],
    },
    {
        "name": "Breville Barista Express Espresso Machine",
        "description": (
            "All-in-one espresso machine with integrated conical burr grinder, "
            "precise temperature control and a manual steam wand."
        ),
        "price": 699,
        "category": "kitchen",
        "subcategory": "coffee",
        "brand": "Breville",
        "model": "BES870XL",
        "rating": 4.5,
        "review_count": 2044,
        "specifications": {
            "weight": "10.4 kg",
            "dimensions": "31 x 33 x 40 cm",
            "color": "brushed stainless steel",
            "warranty": "1 year",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1511920170033-f8396924c348?w=800",
                "alt": "Espresso machine",
                "is_primary": True,
            }
        ],
        "stock": 9,
        "tags": ["coffee", "espresso", "kitchen-appliance"],
    },
    # Books
    {
        "name": "Designing Data-Intensive Applications",
        "description": (
            "The big ideas behind reliable, scalable and maintainable systems, "
            "covering storage engines, replication, partitioning and stream processing."
        ),
        "price": 45.99,
        "original_price": 59.99,
        "category": "books",
        "subcategory": "technology",
        "brand": "O'Reilly Media",
        "rating": 4.9,
        "review_count": 3890,
        "specifications": {
            "weight": "1.1 kg",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1544947950-fa07a98d237f?w=800",
                "alt": "Book cover",
                "is_primary": True,
            }
        ],
        "stock": 150,
        "tags": ["programming", "databases", "distributed-systems"],
    },
    # Sports
    {
        "name": "Garmin Forerunner 265 GPS Running Watch",
        "description": (
            "Running smartwatch with AMOLED display, training readiness insights, "
            "multi-band GPS and up to 13 days of battery life."
        ),
        "price": 449,
        "category": "sports",
        "subcategory": "wearables",
        "brand": "Garmin",
        "model": "Forerunner 265",
        "rating": 4.6,
        "review_count": 764,
        "specifications": {
            "battery": "Up to 13 days",
            "display_size": "1.3-inch",
            "weight": "47g",
            "color": "black",
        },
        "images": [
            {
                "url": "https://images.unsplash.com/photo-1508685096489-7aacd43bd3b1?w=800",
                "alt": "GPS running watch",
                "is_primary": True,
            }
        ],
        "stock": 28,
        "tags": ["running", "gps", "fitness", "smartwatch"],
    },
]


def load_sample_products() -> list[ProductInput]:
    """Validate and return the sample catalog.

    Returns:
        Validated product inputs.

    Raises:
        pydantic.ValidationError: If any sample entry is malformed.
    """
    return [ProductInput.model_validate(entry) for entry in SAMPLE_PRODUCTS]

import sys
import os
from datetime import date

from sqlmodel import Session

# Add current directory to path
sys.path.append(os.getcwd())

from studio.core.errors import ConflictError
from studio.db.session import engine, init_db
from studio.schemas.client import ClientCreate
from studio.schemas.image import ImageCreate
from studio.schemas.shoot import GallerySettings, ShootCreate
from studio.services import clients as client_service
from studio.services import images as image_service
from studio.services import sequencing
from studio.services import shoots as shoot_service

DEMO_CLIENTS = [
    {
        "name": "Sarah Johnson",
        "email": "sarah@example.com",
        "phone": "+27 83 123 4567",
        "address": "123 Main Street, Cape Town, 8001",
    },
    {
        "name": "Michael Smith",
        "email": "michael@example.com",
        "phone": "+27 82 987 6543",
        "address": "456 Oak Avenue, Stellenbosch, 7600",
    },
]

DEMO_SHOOTS = [
    {
        "client": "sarah@example.com",
        "title": "Sarah's Portrait Session",
        "shoot_type": "portrait",
        "shoot_date": date(2024, 1, 15),
        "location": "Kirstenbosch Botanical Gardens, Cape Town",
        "description": "A beautiful outdoor portrait session in Kirstenbosch Gardens",
        "custom_slug": "sarah-portraits-2024",
        "custom_title": "Golden Hour Portraits",
        "seo_tags": ["portrait photography", "cape town", "kirstenbosch"],
        "gallery_settings": {"background_color": "white", "layout_style": "masonry", "border_radius": 12},
        "images": ["sarah-portrait-01.jpg", "sarah-portrait-02.jpg", "sarah-portrait-03.jpg", "sarah-portrait-04.jpg"],
    },
    {
        "client": "michael@example.com",
        "title": "Michael & Emma's Wedding",
        "shoot_type": "wedding",
        "shoot_date": date(2024, 2, 20),
        "location": "La Paris Estate, Franschhoek",
        "description": "A romantic wedding celebration at La Paris Estate",
        "custom_slug": "michael-emma-wedding",
        "custom_title": "A Love Story in Franschhoek",
        "seo_tags": ["wedding photography", "franschhoek", "la paris estate"],
        "gallery_settings": {"background_color": "black", "layout_style": "square", "border_radius": 6},
        "images": [
            "wedding-ceremony-01.jpg", "wedding-ceremony-02.jpg", "wedding-reception-01.jpg",
            "wedding-couples-01.jpg", "wedding-details-01.jpg", "wedding-dance-01.jpg",
        ],
    },
    {
        "client": "sarah@example.com",
        "title": "Johnson Family Photos",
        "shoot_type": "family",
        "shoot_date": date(2024, 3, 10),
        "location": "Camps Bay Beach, Cape Town",
        "description": "Annual family portrait session at the beach",
        "custom_slug": "johnson-family-2024",
        "custom_title": "Family Moments by the Sea",
        "seo_tags": ["family photography", "camps bay", "sunset"],
        "gallery_settings": {"background_color": "#333333", "layout_style": "masonry", "border_radius": 20},
        "images": ["family-beach-01.jpg", "family-beach-02.jpg", "family-beach-03.jpg"],
    },
]


def seed_demo_data():
    print("--- Demo Data Seed ---")
    init_db()

    with Session(engine) as session:
        clients = {}
        for data in DEMO_CLIENTS:
            existing = client_service.get_client_by_email(session, data["email"])
            if existing:
                print(f"Client {data['email']} already exists.")
                clients[data["email"]] = existing
                continue
            clients[data["email"]] = client_service.create_client(session, ClientCreate(**data), user_id="seed")
            print(f"✓ Created client: {data['name']}")

        for data in DEMO_SHOOTS:
            fields = {k: v for k, v in data.items() if k not in ("client", "images", "gallery_settings")}
            try:
                shoot = shoot_service.create_shoot(session, ShootCreate(
                    client_id=clients[data["client"]].id,
                    gallery_settings=GallerySettings(**data["gallery_settings"]),
                    **fields,
                ))
            except ConflictError:
                print(f"Shoot {data['custom_slug']} already exists, skipping.")
                continue

            image_ids = []
            for n, filename in enumerate(data["images"], start=1):
                image = image_service.create_image(session, ImageCreate(
                    shoot_id=shoot.id,
                    filename=filename,
                    storage_path=f"https://picsum.photos/600/800?random={shoot.id * 100 + n}",
                    thumbnail_path=f"https://picsum.photos/300/400?random={shoot.id * 100 + n}",
                ))
                image_ids.append(image.id)
            sequencing.set_cover(session, shoot.id, image_ids[0])
            print(f"✓ Created shoot {shoot.custom_slug} with {len(image_ids)} images")

    print("\nDemo data ready!")


if __name__ == "__main__":
    seed_demo_data()

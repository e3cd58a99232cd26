import sys
import os
from sqlmodel import Session, select

# Add current directory to path so we can import studio
sys.path.append(os.getcwd())

from studio.core.config import settings
from studio.db.session import engine, init_db
from studio.models import Client, Image, Shoot
from studio.site_config import DEFAULT_SITE_CONFIG, FileOverrideBackend, SiteConfigStore


def verify_database():
    print("--- Database Verification ---")
    try:
        # This will create tables if they don't exist
        print("Attempting to create tables...")
        init_db()
        print("Table creation/verification successful.")

        with Session(engine) as session:
            for model in (Client, Shoot, Image):
                count = len(session.exec(select(model.id)).all())
                print(f"{model.__tablename__}: {count} rows")
            print("Database connection test: SUCCESS")

    except Exception as e:
        print(f"Database connection test: FAILED")
        print(f"Error: {e}")
        if "sshtunnel" in str(e).lower():
            print("\nTIP: Make sure your SSH credentials in .env are correct and you are not blocked by a firewall.")
        elif "mysql" in str(e).lower():
            print("\nTIP: Ensure the database server is running and the user has correct permissions.")


def verify_site_config():
    print("\n--- Site Config Verification ---")
    store = SiteConfigStore(FileOverrideBackend(settings.SITE_CONFIG_OVERRIDES_PATH), DEFAULT_SITE_CONFIG).load()
    print(f"Overrides file: {settings.SITE_CONFIG_OVERRIDES_PATH}")
    print(f"Overridden sections: {sorted(store.overrides) or 'none'}")


if __name__ == "__main__":
    verify_database()
    verify_site_config()

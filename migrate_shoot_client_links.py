"""
Migration script to turn legacy shoot -> client email links into client ids

Older rows stored the client's email in shoots.client_id. Every such row is
resolved to the id of the client with that email. If any email has no
matching client the whole migration is aborted and nothing is changed.
"""
import sys
import os
from sqlmodel import text

# Add current directory to path
sys.path.append(os.getcwd())

from studio.db.session import engine


def migrate_shoot_client_links():
    print("--- Migrating Shoot Client Links ---")

    with engine.begin() as conn:
        rows = conn.execute(text(
            "SELECT id, client_id FROM shoots WHERE CAST(client_id AS CHAR) LIKE '%@%'"
        )).all()
        if not rows:
            print("No legacy email links found.")
        else:
            print(f"Found {len(rows)} shoots linked by email.")

        clients = {
            email.lower(): client_id
            for client_id, email in conn.execute(text("SELECT id, email FROM clients WHERE email IS NOT NULL"))
        }

        unknown = sorted({str(link).lower() for _, link in rows if str(link).lower() not in clients})
        if unknown:
            # Raising inside begin() rolls everything back
            raise RuntimeError(f"No client found for emails: {', '.join(unknown)}")

        for shoot_id, link in rows:
            client_id = clients[str(link).lower()]
            conn.execute(
                text("UPDATE shoots SET client_id = :client_id WHERE id = :shoot_id"),
                {"client_id": client_id, "shoot_id": shoot_id},
            )
            print(f"✓ Shoot {shoot_id}: {link} -> client {client_id}")

        if engine.dialect.name == "mysql":
            try:
                conn.execute(text("ALTER TABLE shoots MODIFY client_id INT NOT NULL"))
                conn.execute(text(
                    "ALTER TABLE shoots ADD CONSTRAINT fk_shoot_client FOREIGN KEY (client_id) REFERENCES clients(id)"
                ))
                print("✓ client_id is now an integer foreign key")
            except Exception as e:
                print(f"! Foreign key might already exist or error: {e}")

    print("\n✓ Migration completed successfully!")


if __name__ == "__main__":
    migrate_shoot_client_links()

# backend/create_demo_data.py
import logging

from database.demo_data import seed_demo_data
from database.session import Base, SessionLocal, engine
import models  # noqa: F401


def create_demo_data():
    # create tables first
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_demo_data(db)
    except Exception as e:
        print(f"❌ Error creating demo data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_demo_data()

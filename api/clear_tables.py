"""
Script to clear contents from the study_session, card and deck tables.
"""
import sys
from sqlmodel import Session, text
from flashdeck.core.database import engine
import logging

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def clear_tables():
    """Clear all data from the study_session, card and deck tables."""
    with Session(engine) as session:
        try:
            # Children first (foreign keys point at deck)
            for table in ("study_session", "card", "deck"):
                logger.info(f"Deleting all rows from {table}...")
                result = session.exec(text(f"DELETE FROM {table}"))
                logger.info(f"Deleted {result.rowcount} row(s) from {table}")

            session.commit()
            logger.info("Successfully cleared study_session, card and deck tables")

        except Exception as e:
            session.rollback()
            logger.error("Error clearing tables: %s", e, exc_info=True)
            raise


if __name__ == "__main__":
    logger.info("Starting table clearing...")
    try:
        clear_tables()
        logger.info("Successfully completed!")
    except Exception as e:
        logger.error("Error during table clearing: %s", e, exc_info=True)
        sys.exit(1)

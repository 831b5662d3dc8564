from app.database import Base, get_engine
from app.logging_config import configure_logging
from app.utils.logger import get_logger
import app.models  # noqa: F401  registers every table on Base.metadata

logger = get_logger(__name__)

def init_db(engine=None):
    """Create any missing tables."""
    engine = engine or get_engine()
    try:
        Base.metadata.create_all(bind=engine)
        logger.info(f"Database initialized with {len(Base.metadata.tables)} tables")
    except Exception as e:
        logger.error(f"Error during database initialization: {e}")
        raise

if __name__ == "__main__":
    configure_logging()
    init_db()

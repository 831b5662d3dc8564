from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool
from app.config import settings
from app.utils.logger import get_logger

logger = get_logger(__name__)

# Database connection pooling configuration
POOL_SIZE = 5          # Base connections per process
MAX_OVERFLOW = 10      # Additional connections when needed
POOL_TIMEOUT = 30      # Seconds to wait for connection
POOL_RECYCLE = 1800    # Recycle connections every 30 minutes
POOL_PRE_PING = True   # Validate connections before use

# Global variables for lazy initialization
_engine = None
_session_local = None

def get_engine():
    """Get database engine with lazy initialization."""
    global _engine
    if _engine is None:
        if settings.DATABASE_URL.startswith("sqlite"):
            # SQLite manages its own pooling; QueuePool would split an in-memory db
            _engine = create_engine(
                settings.DATABASE_URL,
                connect_args={"check_same_thread": False},
                echo=settings.DEBUG,
            )
            logger.info("Database engine configured for SQLite")
        else:
            _engine = create_engine(
                settings.DATABASE_URL,
                poolclass=QueuePool,
                pool_size=POOL_SIZE,
                max_overflow=MAX_OVERFLOW,
                pool_timeout=POOL_TIMEOUT,
                pool_recycle=POOL_RECYCLE,
                pool_pre_ping=POOL_PRE_PING,
                echo=settings.DEBUG,  # Log SQL queries in debug mode
                echo_pool=settings.DEBUG,
            )
            logger.info(f"Database pool configured: size={POOL_SIZE}, max_overflow={MAX_OVERFLOW}, timeout={POOL_TIMEOUT}s")
    return _engine

def get_session_local():
    """Get SessionLocal with lazy initialization."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=get_engine())
    return _session_local

Base = declarative_base()

def get_db():
    """
    Provide a database session with automatic cleanup.

    Rolls the session back and re-raises when the caller fails.
    """
    SessionLocal = get_session_local()
    db = SessionLocal()
    try:
        yield db
    except Exception as e:
        logger.error(f"Database session error: {e}")
        try:
            db.rollback()
        except Exception as rollback_error:
            logger.error(f"Error during rollback: {rollback_error}")
        raise
    finally:
        db.close()

def get_pool_status():
    """
    Get current database connection pool status.
    Useful for monitoring and debugging.
    """
    pool = get_engine().pool
    if not isinstance(pool, QueuePool):
        return {"pool_type": type(pool).__name__}
    return {
        "pool_size": pool.size(),
        "checked_in": pool.checkedin(),
        "checked_out": pool.checkedout(),
        "overflow": pool.overflow(),
        "pool_type": type(pool).__name__
    }

def reset_pool():
    """Dispose the engine so the next session builds a fresh pool."""
    global _engine, _session_local
    if _engine is not None:
        logger.info("Resetting database connection pool...")
        _engine.dispose()
    _engine = None
    _session_local = None

import asyncio
import sys
from pathlib import Path

BACKEND_ROOT = Path(__file__).resolve().parents[1]
# Ensure backend root on import path
sys.path.insert(0, str(BACKEND_ROOT))

from app.config import settings  # noqa: E402


def ensure_dirs():
    from app.storage.local import ensure_upload_dir
    return ensure_upload_dir()


async def recreate_db():
    # Remove existing SQLite file
    if not settings.DATABASE_URL:
        db_path = Path(settings.DATABASE_PATH)
        if not db_path.is_absolute():
            db_path = Path.cwd() / db_path
        if db_path.exists():
            db_path.unlink()

    from app.database import create_tables, dispose_engine
    await create_tables()
    await dispose_engine()


if __name__ == '__main__':
    upload_dir = ensure_dirs()
    asyncio.run(recreate_db())
    print(f'Database recreated and {upload_dir} ensured.')

import os

from app.config import settings


def upload_dir() -> str:
    base_dir = settings.UPLOAD_DIR
    if not os.path.isabs(base_dir):
        base_dir = os.path.join(os.getcwd(), base_dir)
    return base_dir


def ensure_upload_dir() -> str:
    base_dir = upload_dir()
    os.makedirs(base_dir, exist_ok=True)
    return base_dir


def public_url(file_name: str) -> str:
    return f"{settings.UPLOAD_URL_PREFIX.rstrip('/')}/{file_name}"


def write_file(file_name: str, data: bytes) -> str:
    """Write ``data`` under the upload directory and fsync it.

    A failure part-way through may leave a partial file behind; nothing is
    cleaned up.
    """
    fpath = os.path.join(ensure_upload_dir(), file_name)
    with open(fpath, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    return fpath

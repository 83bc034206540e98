import pytest
from sqlalchemy import select, func

from app.errors import NotFound, ValidationError
from app.services import media
from app.services import users as user_directory
from models.user import User


async def _count_users(db):
    return (await db.execute(select(func.count(User.id)))).scalar_one()


def test_get_or_create_is_idempotent(run):
    first = run(user_directory.get_or_create, "neighbor@x.com")
    second = run(user_directory.get_or_create, "neighbor@x.com")
    assert first.id == second.id
    assert first.display_name == "neighbor"
    assert run(_count_users) == 1


def test_get_by_email_counts_posts(run, make_post):
    make_post(author_email="a@x.com")
    make_post(author_email="b@x.com")
    user, posts_count = run(user_directory.get_by_email, "a@x.com")
    assert user.email == "a@x.com"
    assert posts_count == 1


def test_get_by_email_unknown(run):
    with pytest.raises(NotFound):
        run(user_directory.get_by_email, "ghost@x.com")


def test_default_display_name():
    assert user_directory.default_display_name("jane.doe@example.com") == "jane.doe"
    assert user_directory.default_display_name("no-at-sign") == "no-at-sign"


@pytest.mark.parametrize("filename, ext", [
    ("photo.png", "png"),
    ("archive.tar.gif", "gif"),
    ("noext", "noext"),
    ("../../etc/passwd.jpg", "jpg"),
    ("C:\\Users\\me\\pic.webp", "webp"),
])
def test_original_extension(filename, ext):
    assert media.original_extension(filename) == ext


def test_stored_name():
    assert media.stored_name(7, "cat.jpeg", timestamp_ms=1700000000123) == "7_1700000000123.jpeg"


def test_validate_upload_boundaries():
    media.validate_upload(5 * 1024 * 1024, "image/png")
    with pytest.raises(ValidationError):
        media.validate_upload(5 * 1024 * 1024 + 1, "image/png")
    with pytest.raises(ValidationError):
        media.validate_upload(10, "image/bmp")
    with pytest.raises(ValidationError):
        media.validate_upload(10, None)


def test_validate_upload_is_case_sensitive():
    media.validate_upload(10, "image/jpeg")
    with pytest.raises(ValidationError):
        media.validate_upload(10, "Image/JPEG")

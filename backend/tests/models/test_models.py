"""ORM Models: attributes and relations of Author, Category, Post and Account."""

from app.models.account import Account
from app.models.author import Author
from app.models.category import Category
from app.models.post import Post


def test_author_has_name_genre_and_bio():
    author = Author()
    author.name = "Joe Burgess"
    author.genre = "Fiction"
    author.bio = "I write novels."
    assert author.name == "Joe Burgess"
    assert author.genre == "Fiction"
    assert author.bio == "I write novels."


async def test_author_timestamps_set_on_insert(test_db):
    author = Author(name="Joe Burgess")
    test_db.add(author)
    await test_db.commit()
    await test_db.refresh(author)
    assert author.created_at is not None
    assert author.updated_at is not None


async def test_category_has_many_posts(test_db):
    category = Category(name="cats")
    test_db.add(category)
    await test_db.commit()
    await test_db.refresh(category, ["posts"])
    assert category.posts == []

    test_db.add(Post(title="Whiskers", category_id=category.id))
    await test_db.commit()
    await test_db.refresh(category, ["posts"])
    assert [p.title for p in category.posts] == ["Whiskers"]


async def test_post_belongs_to_author(test_db):
    author = Author(name="Joe Burgess")
    test_db.add(author)
    await test_db.commit()

    post = Post(title="My Post", description="My post desc", author_id=author.id)
    test_db.add(post)
    await test_db.commit()
    await test_db.refresh(post, ["author", "category"])
    assert post.author.name == "Joe Burgess"
    assert post.category is None


async def test_post_has_post_status_field(test_db):
    post = Post(title="My Post", description="My post desc", post_status=True)
    test_db.add(post)
    await test_db.commit()
    assert post.post_status is True


async def test_account_has_payment_status(test_db):
    account = Account(name="acme", payment_status="paid")
    test_db.add(account)
    await test_db.commit()
    await test_db.refresh(account)
    assert account.payment_status == "paid"

"""
Unit-of-work semantics of Repository.commit().
"""

from northwind.core.repository import Repository, products_of_category, user_by_refresh_token
from northwind.models import Category, Product, User


def test_commit_with_nothing_staged_reports_false(db_session, category):
    categories = Repository(db_session, Category)
    assert categories.commit() is False


def test_explicit_update_without_changes_reports_true(db_session, category):
    categories = Repository(db_session, Category)
    category.name = category.name
    categories.update(category)

    assert categories.commit() is True
    # the marker does not outlive the commit
    assert categories.commit() is False


def test_update_counts_across_repositories(db_session, category, products):
    categories = Repository(db_session, Category)
    Repository(db_session, Product).update(products[0])

    assert categories.commit() is True


def test_commit_with_changes_reports_true(db_session):
    categories = Repository(db_session, Category)
    categories.add(Category(name="Produce"))
    assert categories.commit() is True


def test_repositories_share_one_change_set(db_session, category):
    categories = Repository(db_session, Category)
    products = Repository(db_session, Product)

    products.add(Product(name="Tofu", category_id=category.id))
    # committing through any repository persists the shared change set
    assert categories.commit() is True
    assert products_of_category(products, category.id).count() == 1


def test_constraint_violation_reports_false_and_rolls_back(db_session, category):
    categories = Repository(db_session, Category)
    categories.add(Category(name=category.name))

    assert categories.commit() is False
    assert categories.find_all().count() == 1


def test_foreign_key_violation_reports_false(db_session):
    products = Repository(db_session, Product)
    products.add(Product(name="Orphan", category_id=12345))

    assert products.commit() is False
    assert products.find_all().count() == 0


def test_deleting_unsaved_entity_discards_it(db_session):
    categories = Repository(db_session, Category)
    draft = Category(name="Draft")
    categories.add(draft)
    categories.delete(draft)

    assert categories.commit() is False
    assert categories.find_all().count() == 0


def test_unknown_refresh_token(db_session):
    users = Repository(db_session, User)
    assert user_by_refresh_token(users, "missing") is None
    assert user_by_refresh_token(users, None) is None

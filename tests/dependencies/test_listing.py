"""Unit tests for listing query parameter dependencies"""
import pytest

from app.core.errors import ValidationFailed
from app.dependencies.listing import listing_options, product_list_options, user_list_options


def parse(dependency, sort="-createdAt", page=1, limit=10, search=None):
    return dependency(page=page, limit=limit, sort=sort, search=search)


class TestListingOptions:

    def test_builds_list_options(self):
        options = parse(product_list_options, sort="-price", page=2, limit=5, search="phone")

        assert options.sort == "-price"
        assert options.skip == 5
        assert options.search == "phone"

    @pytest.mark.parametrize("sort", ["name", "-name", "createdAt", "-updatedAt", "+price"])
    def test_product_sort_keys(self, sort):
        assert parse(product_list_options, sort=sort).sort == sort

    def test_unknown_sort_key_is_rejected_at_the_boundary(self):
        with pytest.raises(ValidationFailed) as exc_info:
            parse(product_list_options, sort="-user")

        assert exc_info.value.status_code == 400
        assert exc_info.value.errors == [{"field": "sort", "message": "Cannot sort by 'user'"}]

    def test_each_entity_has_its_own_sort_keys(self):
        assert parse(user_list_options, sort="email").sort == "email"
        with pytest.raises(ValidationFailed):
            parse(product_list_options, sort="email")
        with pytest.raises(ValidationFailed):
            parse(user_list_options, sort="price")

    def test_custom_fields(self):
        dependency = listing_options(("name",))
        with pytest.raises(ValidationFailed):
            parse(dependency, sort="-createdAt")

"""Unit tests for the user registry."""

import pytest

from user_registry_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from user_registry_api.app.services.user_registry import SEED_USERS, UserRegistry, total_pages


@pytest.mark.unit
class TestTotalPages:
    """Tests for the page count formula."""

    def test_partial_last_page(self):
        assert total_pages(7, 3) == 3

    def test_exact_multiple(self):
        assert total_pages(6, 3) == 2

    def test_empty(self):
        assert total_pages(0, 3) == 0

    def test_legacy_formula_over_counts_exact_multiple(self):
        assert total_pages(6, 3, legacy=True) == 3
        assert total_pages(7, 3, legacy=True) == 3
        assert total_pages(0, 3, legacy=True) == 1


@pytest.mark.unit
class TestUserRegistry:
    """Tests for UserRegistry."""

    def test_seed_loads_demo_users(self, registry):
        assert len(registry) == 7
        assert registry.count() == 7

    def test_rejects_invalid_page_size(self):
        with pytest.raises(ValueError):
            UserRegistry(page_size=0)

    @pytest.mark.asyncio
    async def test_first_page(self, registry):
        page = await registry.list_users_page(1)
        assert [user.id for user in page.data] == [1, 2, 3]
        assert page.page == 1
        assert page.per_page == 3
        assert page.total == 7
        assert page.total_pages == 3

    @pytest.mark.asyncio
    async def test_last_page_is_partial(self, registry):
        page = await registry.list_users_page(3)
        assert [user.id for user in page.data] == [7]

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, registry):
        page = await registry.list_users_page(50)
        assert page.data == []
        assert page.total == 7

    @pytest.mark.asyncio
    async def test_pages_never_exceed_page_size(self, registry):
        for number in range(1, 6):
            page = await registry.list_users_page(number)
            assert len(page.data) <= page.per_page

    @pytest.mark.asyncio
    async def test_explicit_page_size(self, registry):
        page = await registry.list_users_page(2, page_size=5)
        assert [user.id for user in page.data] == [6, 7]
        assert page.total_pages == 2

    @pytest.mark.asyncio
    async def test_page_below_one_is_rejected(self, registry):
        with pytest.raises(ValueError):
            await registry.list_users_page(0)
        with pytest.raises(ValueError):
            await registry.list_users_page(1, page_size=0)

    @pytest.mark.asyncio
    async def test_legacy_total_pages(self):
        registry = UserRegistry(page_size=3, legacy_total_pages=True)
        registry.seed(SEED_USERS[:6])
        page = await registry.list_users_page(1)
        assert page.total_pages == 3

    @pytest.mark.asyncio
    async def test_list_users_keeps_insertion_order(self, registry):
        await registry.create_user(UserCreate(email="token@gmail.com", name="Token Black"))
        users = await registry.list_users()
        assert [user.id for user in users] == [1, 2, 3, 4, 5, 6, 7, 8]

    @pytest.mark.asyncio
    async def test_create_then_get(self, registry):
        created = await registry.create_user(UserCreate(email="wendy@gmail.com", name="Wendy Testaburger"))
        assert created.id == 8
        fetched = await registry.get_user(created.id)
        assert fetched == created

    @pytest.mark.asyncio
    async def test_create_without_fields_stores_nulls(self, registry):
        created = await registry.create_user(UserCreate())
        assert created.email is None
        assert created.name is None

    @pytest.mark.asyncio
    async def test_get_missing_user(self, registry):
        assert await registry.get_user(23) is None

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, registry):
        updated = await registry.update_user(2, UserUpdate(email="stan@gmail.com", name="Stanley Marsh"))
        assert updated == UserRead(id=2, email="stan@gmail.com", name="Stanley Marsh")
        assert await registry.get_user(2) == updated

    @pytest.mark.asyncio
    async def test_update_with_missing_field_clears_it(self, registry):
        updated = await registry.update_user(2, UserUpdate(name="Stan"))
        assert updated.email is None
        assert updated.name == "Stan"

    @pytest.mark.asyncio
    async def test_update_missing_user_leaves_registry_unchanged(self, registry):
        before = await registry.list_users()
        assert await registry.update_user(99, UserUpdate(email="x@y.z", name="X")) is None
        assert await registry.list_users() == before

    @pytest.mark.asyncio
    async def test_delete_then_get(self, registry):
        assert await registry.delete_user(1) is True
        assert await registry.get_user(1) is None
        assert len(registry) == 6

    @pytest.mark.asyncio
    async def test_delete_missing_user(self, registry):
        assert await registry.delete_user(42) is False
        assert len(registry) == 7

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, registry):
        await registry.delete_user(7)
        created = await registry.create_user(UserCreate(email="a@b.c", name="A"))
        assert created.id == 8

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, registry):
        user = await registry.get_user(1)
        user.name = "Changed"
        stored = await registry.get_user(1)
        assert stored.name == "Eric Cartman"

    @pytest.mark.asyncio
    async def test_empty_registry_counts_from_one(self):
        registry = UserRegistry()
        created = await registry.create_user(UserCreate(email="first@gmail.com", name="First"))
        assert created.id == 1
        page = await registry.list_users_page(1)
        assert page.total_pages == 1

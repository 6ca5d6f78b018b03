"""Unit tests for user queries and mutations, called directly."""

import pytest

from graphql_api.resolvers.user.queries import UserQueries
from graphql_api.resolvers.user.mutations import UserMutations
from graphql_api.schema import create_schema
from domain.user.core.exceptions.user_errors import UnauthorizedError, UserNotFoundError
from domain.user.core.value_objects.external_subject import ExternalSubject
from domain.user.core.value_objects.user_id import UserId


CREATE_ARGS = {
    "username": "jane",
    "fullname": "Jane Doe",
    "image": "https://img.example.com/jane.png",
    "email": "jane@example.com",
}


@pytest.fixture
def queries():
    return UserQueries()


@pytest.fixture
def mutations():
    return UserMutations()


@pytest.mark.asyncio
async def test_create_user_does_not_need_identity(mutations, make_info, user_repository):
    result = await mutations.create_user(info=make_info(), clerk_id="user_2abc", **CREATE_ARGS)

    assert result is True
    stored = await user_repository.find_by_external_subject(ExternalSubject("user_2abc"))
    assert stored is not None
    assert stored.full_name == "Jane Doe"
    assert stored.bio is None


@pytest.mark.asyncio
async def test_create_user_twice_keeps_first_record(mutations, make_info, user_repository):
    info = make_info()
    await mutations.create_user(info=info, clerk_id="user_2abc", **CREATE_ARGS)
    first = await user_repository.find_by_external_subject(ExternalSubject("user_2abc"))

    result = await mutations.create_user(
        info=info, clerk_id="user_2abc", **{**CREATE_ARGS, "username": "other"}
    )

    assert result is True
    assert user_repository.count() == 1
    again = await user_repository.find_by_external_subject(ExternalSubject("user_2abc"))
    assert again.user_id == first.user_id
    assert again.username == "jane"


@pytest.mark.asyncio
async def test_create_user_without_repository_raises(mutations):
    class _Info:
        context = {}

    with pytest.raises(RuntimeError, match="user_repository"):
        await mutations.create_user(info=_Info(), clerk_id="user_2abc", **CREATE_ARGS)


@pytest.mark.asyncio
async def test_get_user_by_clerk_id(queries, mutations, make_info):
    info = make_info()
    await mutations.create_user(info=info, clerk_id="user_2abc", **CREATE_ARGS)

    found = await queries.get_user_by_clerk_id(info=info, clerk_id="user_2abc")
    missing = await queries.get_user_by_clerk_id(info=info, clerk_id="user_nobody")

    assert found is not None
    assert found.username == "jane"
    assert missing is None


@pytest.mark.asyncio
async def test_get_user_profile(queries, make_info, user_repository, make_user):
    user = make_user("user_a")
    await user_repository.add(user)

    result = await queries.get_user_profile(info=make_info(), id=str(user.user_id))

    assert result.user_id == user.user_id


@pytest.mark.asyncio
async def test_get_user_profile_unknown_id(queries, make_info):
    with pytest.raises(UserNotFoundError):
        await queries.get_user_profile(info=make_info(), id=str(UserId.generate()))


@pytest.mark.asyncio
async def test_get_user_profile_malformed_id(queries, make_info):
    with pytest.raises(UserNotFoundError):
        await queries.get_user_profile(info=make_info(), id="not-a-uuid")


@pytest.mark.asyncio
async def test_update_profile_requires_identity(mutations, make_info):
    with pytest.raises(UnauthorizedError):
        await mutations.update_profile(info=make_info(), fullname="New Name")


@pytest.mark.asyncio
async def test_update_profile_unprovisioned_caller(mutations, make_info):
    with pytest.raises(UserNotFoundError):
        await mutations.update_profile(info=make_info("user_ghost"), fullname="New Name")


@pytest.mark.asyncio
async def test_update_profile_sets_name_and_clears_bio(
    mutations, make_info, user_repository, make_user
):
    user = make_user("user_a", bio="old bio")
    await user_repository.add(user)

    result = await mutations.update_profile(info=make_info("user_a"), fullname="Renamed")

    assert result is True
    stored = await user_repository.find_by_id(user.user_id)
    assert stored.full_name == "Renamed"
    assert stored.bio is None


@pytest.mark.asyncio
@pytest.mark.parametrize("clerk_id", ["", " user_1", "x" * 300])
async def test_get_user_by_clerk_id_unusable_value_returns_none(queries, make_info, clerk_id):
    result = await queries.get_user_by_clerk_id(info=make_info(), clerk_id=clerk_id)

    assert result is None


@pytest.mark.asyncio
@pytest.mark.parametrize("clerk_id", ["", " user_1", "x" * 300])
async def test_get_user_by_clerk_id_unusable_value_through_schema(
    make_info, clerk_id
):
    schema = create_schema()

    result = await schema.execute(
        "query($c: String!) { user { getUserByClerkId(clerkId: $c) { id } } }",
        variable_values={"c": clerk_id},
        context_value=make_info().context,
    )

    assert result.errors is None
    assert result.data == {"user": {"getUserByClerkId": None}}

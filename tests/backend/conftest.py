"""
Backend-specific test fixtures.

These fixtures build CredentialStore instances over the mock database
with and without identifier conversion.
"""

import pytest_asyncio


# =============================================================================
# Credential Store Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def store(mock_accounts_db, fixed_clock):
    """CredentialStore with ObjectId conversion and a fixed clock."""
    from accounts_mongo.services.credential_store import CredentialStore

    store = CredentialStore(mock_accounts_db, {"date_provider": fixed_clock})
    await store.setup_indexes()
    yield store


@pytest_asyncio.fixture
async def seeded_store(store, user_doc):
    """CredentialStore whose users collection holds the default test user."""
    await store.users_collection.insert_one(user_doc)
    yield store


@pytest_asyncio.fixture
async def string_id_store(mock_accounts_db, fixed_clock):
    """CredentialStore using opaque string ids and custom timestamp names."""
    from accounts_mongo.services.credential_store import CredentialStore

    store = CredentialStore(
        mock_accounts_db,
        {
            "collection_name": "members",
            "convert_user_id_to_object_id": False,
            "timestamps": {"updated_at": "modified"},
            "date_provider": fixed_clock,
        },
    )
    await store.users_collection.insert_one({
        "_id": "member-1",
        "emails": [{"address": "member@example.com", "verified": False}],
    })
    yield store

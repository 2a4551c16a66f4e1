"""Basic workflow integration tests."""

import pytest

from modelkit import MemoryAdapter, Model, StateError, ValidationError, bind_adapter


class User(Model):
    def defaults(self):
        return {"role": "member", "verified": False}

    def validate(self):
        if not self.get("email"):
            raise ValidationError("email is required")


User.use("set:email", lambda email: email.strip().lower())
User.on("change:email", lambda user: user.set("verified", False))


class Admin(User):
    def defaults(self):
        return {**super().defaults(), "role": "admin"}


audit = []
Admin.on("save delete", lambda admin: audit.append(admin.get("email")))


@pytest.mark.asyncio
async def test_user_lifecycle():
    adapter = MemoryAdapter()
    Stored = User.extend("StoredUser")
    bind_adapter(Stored, adapter)

    user = Stored(email="  Ann@Example.com ")
    assert user.get("email") == "ann@example.com"
    assert user.changed == frozenset({"email"})

    await user.save()
    assert user.to_json() == {
        "id": 1,
        "role": "member",
        "verified": False,
        "email": "ann@example.com",
    }

    user.set("verified", True)
    await user.save()
    assert adapter.get(1)["verified"] is True

    # Changing the email resets verification
    user.set("email", "bob@example.com")
    assert user.get("verified") is False
    assert user.changed == frozenset({"email", "verified"})

    await user.delete()
    assert len(adapter) == 0
    with pytest.raises(StateError):
        user.from_db({}).delete()


def test_validation_blocks_create():
    with pytest.raises(ValidationError):
        User().save()


@pytest.mark.asyncio
async def test_derived_type_inherits_and_extends():
    audit.clear()
    admin = Admin(email="Root@Example.com")

    assert admin.get() == {"role": "admin", "verified": False, "email": "root@example.com"}

    Admin.use("create", lambda model: model.set("_id", "root"))
    await admin.save()

    assert audit == ["root@example.com"]
    assert admin.to_json()["id"] == "root"


def test_sibling_registrations_stay_separate():
    calls = []
    Guest = User.extend("Guest")
    Guest.on("change:name", lambda m: calls.append("guest"))

    Admin(email="a@b.c").set("name", "x")
    User(email="a@b.c").set("name", "x")

    assert calls == []

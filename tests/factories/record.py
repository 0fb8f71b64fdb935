"""Factories for record payloads as the backend serializes them."""

from __future__ import annotations

import factory

from . import PayloadFactory, faker


def _record_id() -> str:
    return faker.unique.pystr(min_chars=15, max_chars=15).lower()


class RecordFactory(PayloadFactory):
    """Any record: identity fields plus timestamps."""

    id = factory.LazyFunction(_record_id)
    collection_id = "pbc_1864281375"
    collection_name = "articles"
    created = factory.LazyFunction(lambda: faker.date_time().strftime("%Y-%m-%d %H:%M:%S.000Z"))
    updated = factory.SelfAttribute("created")


class ArticleFactory(RecordFactory):
    """Record of the ``articles`` demo collection."""

    name = factory.LazyFunction(lambda: faker.sentence(nb_words=3))
    price = factory.LazyFunction(lambda: float(faker.pydecimal(left_digits=3, right_digits=2, positive=True)))
    public = True


class SuperuserRecordFactory(RecordFactory):
    """Record of the ``_superusers`` collection (no ``name`` field)."""

    collection_id = "pbc_3142635823"
    collection_name = "_superusers"
    email = factory.LazyFunction(lambda: faker.unique.email())
    verified = True
    email_visibility = False


class UserRecordFactory(SuperuserRecordFactory):
    """Record of the ``users`` auth collection."""

    collection_id = "_pb_users_auth_"
    collection_name = "users"
    name = factory.LazyFunction(lambda: faker.name())

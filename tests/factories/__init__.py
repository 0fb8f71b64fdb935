"""Factory Boy setup for wire payload generation."""

from __future__ import annotations

import factory
from faker import Faker

faker = Faker()
Faker.seed(1234)


class PayloadFactory(factory.DictFactory):
    """Base factory producing JSON-ready dicts keyed like the backend."""

    class Meta:
        abstract = True
        rename = {
            "collection_id": "collectionId",
            "collection_name": "collectionName",
            "email_visibility": "emailVisibility",
        }

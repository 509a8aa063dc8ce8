"""Stacking values instead of nesting callbacks.

A plain optional chain keeps only its latest value:

    name -> user id -> id string

Often you need the earlier values again at the end:

    name -> user id -> (name + user id) = user
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from valuestack import of, of_nullable

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
log = logging.getLogger("tutorial")


@dataclass(frozen=True)
class User:
    name: str
    user_id: uuid.UUID


def find_user_id(name: str) -> uuid.UUID:
    return uuid.uuid5(uuid.NAMESPACE_DNS, name)


def login_user(name: str, user_id: uuid.UUID) -> User:
    return User(name, user_id)


def main() -> None:
    user = (
        of("Cora")                        # "Cora"
        .and_derive(find_user_id)         # "Cora" + UUID
        .reduce_all(login_user)           # User
        .get()
    )
    log.info("Logged in %s", user)

    # Missing values are ordinary control flow: steps that need them are skipped.
    (
        of_nullable(None)
        .if_empty(lambda: log.warning("Name is missing, using backup source"))
        .or_get(lambda: "Cora")
        .and_derive(lambda _: None)
        .or_get(uuid.uuid4)
        .if_all_present(lambda name, user_id: log.info("User: %s %s", name, user_id))
    )


if __name__ == "__main__":
    main()

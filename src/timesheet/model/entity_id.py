# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

EntityId: TypeAlias = str

PLACEHOLDER_ID_PREFIX = "placeholder-"
WEEKEND_PLACEHOLDER_ID_PREFIX = "weekend-placeholder-"
PLACEHOLDER_USER_ID = "placeholder"


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())

"""Shared constants used across the document model."""
from __future__ import annotations

# Application version
VERSION: str = "1.0.0"

# AsyncAPI major versions whose channel/operation layout the model reads
SUPPORTED_ASYNCAPI_MAJORS: frozenset[str] = frozenset({"2"})

# Operation actions as they appear under a channel
ACTION_PUBLISH: str = "publish"
ACTION_SUBSCRIBE: str = "subscribe"
OPERATION_ACTIONS: tuple[str, ...] = (ACTION_PUBLISH, ACTION_SUBSCRIBE)

# Prefix of vendor extension fields
EXTENSION_PREFIX: str = "x-"

# Binding payload key that carries the binding schema version
BINDING_VERSION_KEY: str = "bindingVersion"
DEFAULT_BINDING_VERSION: str = "latest"

# Parent logger of every module in the model package
MODEL_LOGGER_NAME: str = "src.asyncapi_model"

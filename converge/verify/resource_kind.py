from enum import Enum


class ResourceKind(Enum):
    USER = "user"
    PROJECT = "project"
    ROLE = "role"

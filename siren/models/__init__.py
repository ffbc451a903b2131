from .base import SirenModel, compare, equals
from .criteria import ActionCriteria, EntityCriteria, FieldCriteria, LinkCriteria, MatchResult
from .field import Field
from .link import Link
from .action import Action
from .entity import EmbeddedEntity, Entity, SubEntity

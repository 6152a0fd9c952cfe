"""QueryCraft package - import models here to ensure they're registered."""
from querycraft.users.models import User
from querycraft.queries.models import SavedQuery
from querycraft.connections.models import DatabaseConnection

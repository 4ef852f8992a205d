# Force SQLModel table registration at test discovery time
# This ensures all models are registered before any test database creation
from lilian.models.content import Content  # noqa: F401
from lilian.models.donation import Donation  # noqa: F401
from lilian.models.member import Member  # noqa: F401

"""hexuser - hexagonal user service.

The domain (User entity, UserRepository port) sits at the center. The
FastAPI presentation layer and the SQLAlchemy persistence layer plug in
from outside and only depend on the domain and application interfaces.
"""

__version__ = "1.0.0"

# Public core API
from .errors import PugaipadamError, DiscoveryError, UnsupportedExtension, DecodeError  # noqa: F401
from .services.discovery import DiscoveryResult, discover_paths  # noqa: F401
from .services.image_service import ImageRepresentation, ImageService, LoadResult, decode_image  # noqa: F401
from .services.collection_store import CollectionStore  # noqa: F401
from .ui.state import ViewState  # noqa: F401
from .ui.title_status import (  # noqa: F401
    NO_IMAGES_TITLE as NO_IMAGES_TITLE,
    compose_title as compose_title,
    compose_details as compose_details,
)
from .ui.interaction import InteractionHandler, ViewerEvent, WindowMode  # noqa: F401

__version__ = "0.1.0"

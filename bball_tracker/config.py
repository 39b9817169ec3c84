from dataclasses import dataclass
import os

# Default API server for local development
DEFAULT_API_URL = 'http://localhost:3000'


def get_api_url() -> str:
    """
    Get the API server URL from environment variable or default.

    Uses BBALL_API_URL environment variable if set, otherwise returns the
    local development server.

    Returns:
        Base URL of the game API server (without /api/v1)
    """
    return os.getenv('BBALL_API_URL', DEFAULT_API_URL)


@dataclass
class APIConfig:
    base_url: str = DEFAULT_API_URL
    token: str = None
    timeout: float = 10
    max_retries: int = 3
    retry_delay: float = 0.5


@dataclass
class TrackingConfig:
    undo_seconds: float = 5.0
    hot_streak_threshold: int = 3
    event_page_size: int = 100


@dataclass
class Config:
    api: APIConfig = None
    tracking: TrackingConfig = None

    def __post_init__(self):
        if self.api is None:
            self.api = APIConfig()
        if self.tracking is None:
            self.tracking = TrackingConfig()

    @classmethod
    def from_env(cls) -> 'Config':
        return cls(
            api=APIConfig(
                base_url=get_api_url(),
                token=os.getenv('BBALL_API_TOKEN'),
                timeout=float(os.getenv('API_TIMEOUT', 10)),
                max_retries=int(os.getenv('API_MAX_RETRIES', 3)),
                retry_delay=float(os.getenv('API_RETRY_DELAY', 0.5)),
            ),
            tracking=TrackingConfig(
                undo_seconds=float(os.getenv('UNDO_SECONDS', 5)),
                hot_streak_threshold=int(os.getenv('HOT_STREAK_THRESHOLD', 3)),
                event_page_size=int(os.getenv('EVENT_PAGE_SIZE', 100)),
            ),
        )

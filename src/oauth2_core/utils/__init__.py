from .misc import secret_2_safe_str
from .time_utils import get_ts_utcnow

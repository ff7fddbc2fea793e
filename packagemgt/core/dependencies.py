import logging
import threading
from typing import Optional

from packagemgt.domain.models import NugetData

logger = logging.getLogger(__name__)

_nuget_data: Optional[NugetData] = None
_nuget_data_lock = threading.Lock()

def get_nuget_data() -> NugetData:
    global _nuget_data
    if _nuget_data is None:
        with _nuget_data_lock:
            if _nuget_data is None:
                _nuget_data = NugetData()
                logger.debug(
                    "NuGet settings loaded: repository_url=%s output_dir=%s",
                    _nuget_data.repository_url,
                    _nuget_data.output_dir,
                )
    return _nuget_data

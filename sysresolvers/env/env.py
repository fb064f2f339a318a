from typing import Callable, Dict, Literal, Union

from pydantic import BaseModel, StrictStr

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    SYSRESOLVERS_REFRESH_INTERVAL: StrictStr = "1m"
    SYSRESOLVERS_LOOKUP_TIMEOUT: StrictStr = "5s"
    SYSRESOLVERS_LOG_LEVEL: StrictStr = "info"
    SYSRESOLVERS_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    SYSRESOLVERS_LOG_PATH: StrictStr | None = None

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "SYSRESOLVERS_REFRESH_INTERVAL": str,
            "SYSRESOLVERS_LOOKUP_TIMEOUT": str,
            "SYSRESOLVERS_LOG_LEVEL": str,
            "SYSRESOLVERS_LOG_OUTPUT": str,
            "SYSRESOLVERS_LOG_PATH": str,
        }

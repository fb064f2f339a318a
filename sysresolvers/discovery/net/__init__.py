from .split_host import (
    join_host_port as join_host_port,
    split_host as split_host,
    split_host_port as split_host_port,
)

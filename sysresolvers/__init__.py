from sysresolvers.discovery import (
    RefreshError as RefreshError,
    SystemResolvers as SystemResolvers,
    SystemResolversError as SystemResolversError,
    create_system_resolvers as create_system_resolvers,
)

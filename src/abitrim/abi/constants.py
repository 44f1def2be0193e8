"""Listas estáticas de eventos e funções administrativas (boilerplate)."""

# Diamond (EIP-2535)
DIAMOND_EVENTS = frozenset({"DiamondCut", "DiamondOwnershipTransferred"})
DIAMOND_FUNCTIONS = frozenset(
    {
        "diamondCut",
        "facetAddress",
        "facetAddresses",
        "facetFunctionSelectors",
        "facets",
    }
)

# Introspecção (ERC-165)
INTERFACE_EVENTS: frozenset[str] = frozenset()
INTERFACE_FUNCTIONS = frozenset({"supportsInterface"})

# Ownable
OWNER_EVENTS = frozenset({"OwnershipTransferred"})
OWNER_FUNCTIONS = frozenset({"owner", "renounceOwnership", "transferOwnership"})

# Proxy / Initializable
PROXY_EVENTS = frozenset({"Initialized"})
PROXY_FUNCTIONS = frozenset({"initialize"})

# AccessControl
ACCESS_CONTROL_EVENTS = frozenset({"RoleAdminChanged", "RoleGranted", "RoleRevoked"})
ACCESS_CONTROL_FUNCTIONS = frozenset(
    {
        "addAuthorized",
        "authorized",
        "getRoleAdmin",
        "getRoleMember",
        "getRoleMemberCount",
        "grantRole",
        "hasRole",
        "removeAuthorized",
        "renounceRole",
        "revokeRole",
    }
)

# Pausable
PAUSABLE_EVENTS = frozenset({"Paused", "Unpaused"})
PAUSABLE_FUNCTIONS = frozenset(
    {"enabled", "pause", "paused", "unpause", "toggleEnabled", "togglePause"}
)

# Categoria -> (eventos, funções)
EXCLUSION_CATEGORIES: dict[str, tuple[frozenset[str], frozenset[str]]] = {
    "diamond": (DIAMOND_EVENTS, DIAMOND_FUNCTIONS),
    "interface": (INTERFACE_EVENTS, INTERFACE_FUNCTIONS),
    "ownership": (OWNER_EVENTS, OWNER_FUNCTIONS),
    "proxy": (PROXY_EVENTS, PROXY_FUNCTIONS),
    "access-control": (ACCESS_CONTROL_EVENTS, ACCESS_CONTROL_FUNCTIONS),
    "pausable": (PAUSABLE_EVENTS, PAUSABLE_FUNCTIONS),
}

UNUSED_EVENTS: frozenset[str] = frozenset().union(
    *(events for events, _ in EXCLUSION_CATEGORIES.values())
)
UNUSED_FUNCTIONS: frozenset[str] = frozenset().union(
    *(functions for _, functions in EXCLUSION_CATEGORIES.values())
)

# Sufixo de constantes de role (ex: MINTER_ROLE)
ROLE_SUFFIX = "_ROLE"


def is_unused_event(name: str | None) -> bool:
    """Verifica se o evento está na lista de eventos administrativos."""
    return name in UNUSED_EVENTS


def is_unused_function(name: str | None) -> bool:
    """Verifica se a função (ou erro) está na lista de funções administrativas."""
    return name in UNUSED_FUNCTIONS

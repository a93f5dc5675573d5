"""Display status enum for the farm status indicator."""

import enum


class DisplayStatus(str, enum.Enum):
    """Closed set of states shown to the user. Values are the display labels."""

    SYNCED_FARMING = "Farming"  # Synced and farmer port accepts connections
    SYNCED_NOT_FARMING = "Not Farming"  # Synced, farmer unreachable
    SYNCING = "Syncing"
    NOT_SYNCING = "Not Syncing"
    UNKNOWN = "Unknown"  # Contradictory sync flags

"""
HR Dashboard - Share Store
Keeps the candidate id -> shared timestamp relation in a JSON file.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict


logger = logging.getLogger(__name__)


class ShareStore:
    """
    JSON-file persistence for shared candidates.

    The file holds {"shared": {"<id>": "<timestamp>"}, "version", "last_updated"}.
    """

    def __init__(self, shares_file: Path):
        self.shares_file = Path(shares_file)
        self.shares_file.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> Dict[int, str]:
        """Load the shared relation; an unreadable file yields an empty relation."""
        if not self.shares_file.exists():
            return {}

        try:
            with open(self.shares_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return {int(k): str(v) for k, v in data.get("shared", {}).items()}
        except (OSError, ValueError, AttributeError) as e:
            logger.warning("Could not load shared candidates from %s: %s", self.shares_file, e)
            return {}

    def save(self, shared: Dict[int, str]):
        """Write the shared relation to disk."""
        data = {
            "shared": {str(k): v for k, v in sorted(shared.items())},
            "version": "1.0",
            "last_updated": datetime.utcnow().isoformat() + "Z"
        }

        with open(self.shares_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

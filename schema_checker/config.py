# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration management for the schema checker."""

import os
from dataclasses import dataclass


ENV_PREFIX = "SCHEMA_CHECKER_"


@dataclass
class CheckerConfig:
    """Configuration class for schema checking."""
    max_depth: int = 100

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {self.max_depth}")

    @classmethod
    def from_env(cls) -> 'CheckerConfig':
        """Create configuration from environment variables."""
        return cls(
            max_depth=int(os.getenv(ENV_PREFIX + 'MAX_DEPTH', '100')),
        )


# Global configuration instance
checker_config = CheckerConfig.from_env()

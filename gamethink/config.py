"""Configuration management using Pydantic settings."""
from typing import Literal, Optional
from pathlib import Path
import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CONFIG_FILE = "config.yaml"

DEFAULT_TOOL_DESCRIPTION = """A tool for designing game mechanics and building games with Three.js and other open-source libraries.
This tool guides the game development process through structured thinking about mechanics, systems, and implementation.

When to use this tool:
- Designing core game mechanics
- Planning game systems architecture
- Implementing features with Three.js, Cannon.js, Ammo.js, etc.
- Creating game loops and state management
- Developing rendering pipelines
- Building physics systems
- Creating player controls and interactions

Key features:
- Tracks game components (physics, rendering, controls, etc.)
- Associates thoughts with specific libraries (Three.js, Cannon.js, etc.)
- Supports branching for different game systems
- Allows revision of game design decisions
- Flexible thought counting for iterative design
- Maintains context across game development steps

Parameters explained:
- thought: Current game design or implementation decision, e.g.:
* "Implement basic character movement with WASD controls"
* "Add physics using Cannon.js for object collisions"
* "Create Three.js scene with basic lighting"
- nextThoughtNeeded: True if more design steps are needed
- thoughtNumber: Current step in the design process
- totalThoughts: Estimated total design steps needed
- isRevision: If revising a previous game design decision
- revisesThought: Which previous thought is being revised
- branchFromThought: Starting point for a new system branch
- branchId: Identifier for system branch (e.g., "physics-system")
- gameComponent: Game system being worked on (e.g., "physics", "rendering")
- libraryUsed: Library being utilized (e.g., "threejs", "cannonjs")

You should:
1. Start with core game mechanic ideas
2. Break down implementation into components
3. Specify libraries for each component
4. Revise mechanics based on playtesting
5. Branch for parallel system development
6. Adjust totalThoughts as scope changes
7. Document Three.js/Cannon.js implementation details
8. Iterate until game design is complete"""


class ServerConfig(BaseModel):
    """Identity advertised to protocol clients."""
    name: str = "sequential-thinking-game-server"
    version: str = "0.3.0"


class ToolConfig(BaseModel):
    """Configuration for the exposed tool."""
    name: str = Field(default="gamedesignthinking", min_length=1)
    description: str = DEFAULT_TOOL_DESCRIPTION


class FormatterConfig(BaseModel):
    """Configuration for the diagnostic rendering."""
    enabled: bool = True
    margin: int = Field(default=4, ge=2)


class AppConfig(BaseModel):
    """Main application configuration from YAML."""
    server: ServerConfig = Field(default_factory=ServerConfig)
    tool: ToolConfig = Field(default_factory=ToolConfig)
    formatter: FormatterConfig = Field(default_factory=FormatterConfig)


class Settings(BaseSettings):
    """Environment-based settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"
    log_format: Literal["console", "json"] = "console"

    # Config file path; None means ./config.yaml when present
    config_file: Optional[str] = None


def load_yaml_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration from YAML file.

    Without an explicit path, ``config.yaml`` in the working directory is
    used if it exists and built-in defaults otherwise.
    """
    if config_path is None:
        config_file = Path(DEFAULT_CONFIG_FILE)
        if not config_file.exists():
            return AppConfig()
    else:
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_file, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    return AppConfig(**config_data)


# Global configuration instances
settings = Settings()
app_config = load_yaml_config(settings.config_file)

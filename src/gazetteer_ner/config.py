"""
Configuration management for the gazetteer NER system.

Provides centralized configuration using Pydantic for validation and
environment variable support. Supports gazetteer.yaml for per-project settings.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Default data paths relative to project root
DATA_DIR = PROJECT_ROOT / "data"
CORPUS_DIR = DATA_DIR / "corpus"
OUTPUT_DIR = DATA_DIR / "output"

DEFAULT_SPARQL_ENDPOINT = "https://dbpedia.org/sparql"
DEFAULT_SPARQL_QUERY = """\
PREFIX dbo: <http://dbpedia.org/ontology/>
PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>
SELECT DISTINCT ?label WHERE {
    ?film a dbo:Film ;
          dbo:director ?director .
    ?director rdfs:label ?label .
    FILTER (lang(?label) = "en")
}
"""

YAML_FILENAME = "gazetteer.yaml"


def load_gazetteer_yaml(search_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load gazetteer.yaml configuration file.

    Searches for gazetteer.yaml starting from search_dir (or the current
    working directory) and walking up to 3 parent directories.

    Args:
        search_dir: Directory to start searching from

    Returns:
        Dictionary with gazetteer.yaml contents, or empty dict if not found
    """
    start = search_dir or Path.cwd()
    for parent in [start] + list(start.parents)[:3]:
        candidate = parent / YAML_FILENAME
        if candidate.exists():
            with open(candidate, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
    return {}


class Config(BaseSettings):
    """
    Application configuration with environment variable support.

    Configuration can be provided via:
    1. Keyword arguments
    2. gazetteer.yaml
    3. Environment variables (prefixed with GAZETTEER_NER_)
    4. .env file
    5. Default values

    Example:
        export GAZETTEER_NER_CORPUS_DIR="/data/reviews"
        export GAZETTEER_NER_GOLD_PATH="/data/gold.csv"
    """

    model_config = SettingsConfigDict(
        env_prefix="GAZETTEER_NER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Corpus
    corpus_dir: Path = Field(
        default=CORPUS_DIR,
        description="Directory holding one document per file"
    )
    corpus_glob: str = Field(
        default="*.txt",
        description="Glob selecting corpus files inside corpus_dir"
    )

    # Outputs
    gazetteer_path: Path = Field(
        default=OUTPUT_DIR / "gazetteer.csv",
        description="Persisted gazetteer, one entry per line"
    )
    match_table_path: Path = Field(
        default=OUTPUT_DIR / "match_table.csv",
        description="Match table written after a corpus scan"
    )
    metrics_path: Path = Field(
        default=OUTPUT_DIR / "metrics.json",
        description="Evaluation metrics report"
    )
    annotated_path: Path = Field(
        default=OUTPUT_DIR / "annotated.jsonl",
        description="Annotated corpus output (JSON lines)"
    )

    # Gold standard
    gold_path: Optional[Path] = Field(
        default=None,
        description="Gold-standard match list; evaluation is skipped when unset"
    )
    strip_gold_cells: bool = Field(
        default=False,
        description="Trim surrounding whitespace from gold-standard cells"
    )

    # Knowledge base
    label_source: str = Field(
        default="sparql",
        description="Raw label source (sparql/file)"
    )
    sparql_endpoint: str = Field(
        default=DEFAULT_SPARQL_ENDPOINT,
        description="SPARQL endpoint URL"
    )
    sparql_query: str = Field(
        default=DEFAULT_SPARQL_QUERY,
        description="SPARQL query selecting a single label column"
    )
    labels_file: Optional[Path] = Field(
        default=None,
        description="Raw label file used by the 'file' label source"
    )
    request_timeout: float = Field(
        default=60.0,
        gt=0.0,
        description="HTTP timeout for knowledge-base queries (seconds)"
    )

    # Matching and evaluation
    lowercase_documents: bool = Field(
        default=True,
        description="Lower-case document text before matching"
    )
    alignment: str = Field(
        default="id",
        description="System/gold alignment strategy (id/position)"
    )
    beta: float = Field(
        default=1.0,
        gt=0.0,
        description="F-measure beta"
    )

    # Annotation
    annotator: str = Field(
        default="none",
        description="Annotation service (none/regex/spacy)"
    )
    spacy_model: str = Field(
        default="en_core_web_sm",
        description="spaCy model used by the spacy annotator"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level name"
    )

    @field_validator("alignment")
    @classmethod
    def validate_alignment(cls, v: str) -> str:
        """Only id-keyed and positional alignment exist."""
        if v not in ("id", "position"):
            raise ValueError("alignment must be 'id' or 'position'")
        return v

    def ensure_directories(self) -> None:
        """Create parent directories for every output file."""
        for path in (
            self.gazetteer_path,
            self.match_table_path,
            self.metrics_path,
            self.annotated_path,
        ):
            path.parent.mkdir(parents=True, exist_ok=True)


def get_config(search_dir: Optional[Path] = None, **overrides: Any) -> Config:
    """
    Get the application configuration instance.

    Merges settings from environment variables, .env file,
    and gazetteer.yaml (if present). Keyword overrides win over both.

    Returns:
        Config: Application configuration
    """
    yaml_config = load_gazetteer_yaml(search_dir)
    known = {k: v for k, v in yaml_config.items() if k in Config.model_fields}
    known.update({k: v for k, v in overrides.items() if v is not None})
    return Config(**known)

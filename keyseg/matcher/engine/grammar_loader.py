# Path: keyseg/matcher/engine/grammar_loader.py
"""
Grammar Loader

Loads grammar definitions from YAML files in a grammar directory,
validates them against the pydantic models and builds the immutable
engine objects from them.
"""

from pathlib import Path
from typing import Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from ...constants import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_SEPARATOR,
    DEFAULT_TIEBREAKER,
    GRAMMAR_FILE_SUFFIXES,
    TiebreakerType,
)
from ...core.logger import get_input_logger
from ...dictionary import GRAMMARS_DIR
from ..errors import GrammarFileError
from ..models.grammar_definition import GrammarDefinition
from ..models.keyword import Keyword
from ..models.term import Term
from ..verifiers import Verifier, resolve_verifier
from .keyword_matcher import KeywordMatcher
from .term_aggregator import TermAggregator


class GrammarLoader:
    """
    Loads grammar definitions from YAML files.

    A grammar path may be a single file or a directory scanned recursively
    for *.yaml / *.yml files. Each file must be self-contained: its terms
    may only reference keywords declared in the same file.

    Example:
        loader = GrammarLoader()                 # bundled grammars
        aggregator = loader.load_aggregator()

        # Load one file
        definition = loader.load_file(Path('grammars/personal_data.yaml'))
        aggregator = loader.build(definition)
    """

    def __init__(
        self,
        grammar_path: Optional[Path] = None,
        verifiers: Optional[Mapping[str, Verifier]] = None,
        default_separator: str = DEFAULT_SEPARATOR
    ):
        """
        Initialize grammar loader.

        Args:
            grammar_path: Grammar file or directory.
                          Defaults to the bundled dictionary/grammars/
            verifiers: Extra named verifiers available to grammar files
            default_separator: Separator of terms that declare none
        """
        self.logger = get_input_logger('grammar.loader')

        if grammar_path is None:
            self.grammar_path = GRAMMARS_DIR
        else:
            self.grammar_path = Path(grammar_path)

        self.verifiers = dict(verifiers or {})
        self.default_separator = default_separator
        self._definition_cache: Optional[GrammarDefinition] = None

    def grammar_files(self) -> list[Path]:
        """Return the grammar files under the grammar path, sorted."""
        if self.grammar_path.is_file():
            return [self.grammar_path]

        if not self.grammar_path.exists():
            raise GrammarFileError(self.grammar_path, "grammar path does not exist")

        return sorted(
            path for path in self.grammar_path.rglob('*')
            if path.is_file() and path.suffix in GRAMMAR_FILE_SUFFIXES
        )

    def load_all(self, use_cache: bool = True) -> GrammarDefinition:
        """
        Load and merge every grammar file under the grammar path.

        Args:
            use_cache: Whether to use cached results

        Returns:
            One GrammarDefinition holding all keywords and terms

        Raises:
            GrammarFileError: If a file is invalid, a keyword is declared
                              differently in two files, or a term is
                              declared twice
        """
        if use_cache and self._definition_cache is not None:
            return self._definition_cache

        files = self.grammar_files()
        self.logger.info(f"Found {len(files)} grammar definition file(s)")

        keywords = {}
        terms = {}
        for grammar_file in files:
            definition = self.load_file(grammar_file)

            for name, keyword in definition.keywords.items():
                if name in keywords and keywords[name] != keyword:
                    raise GrammarFileError(
                        grammar_file,
                        f"keyword '{name}' conflicts with an earlier declaration"
                    )
                keywords[name] = keyword

            for name, term in definition.terms.items():
                if name in terms:
                    raise GrammarFileError(grammar_file, f"term '{name}' is declared twice")
                terms[name] = term

        merged = GrammarDefinition(keywords=keywords, terms=terms)
        self.logger.info(
            f"Loaded {len(merged.terms)} term(s) over {len(merged.keywords)} keyword(s)"
        )
        self._definition_cache = merged
        return merged

    def load_file(self, file_path: Path) -> GrammarDefinition:
        """
        Load a single grammar definition from a YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            GrammarDefinition; empty if the file is empty

        Raises:
            GrammarFileError: If the file cannot be read, parsed or validated
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise GrammarFileError(file_path, f"cannot be read: {e}", e) from e
        except yaml.YAMLError as e:
            raise GrammarFileError(file_path, f"YAML parse error: {e}", e) from e

        if data is None:
            self.logger.warning(f"Empty file: {file_path}")
            return GrammarDefinition()

        if not isinstance(data, dict):
            raise GrammarFileError(file_path, "top level must be a mapping")

        try:
            definition = GrammarDefinition.model_validate(data)
        except ValidationError as e:
            raise GrammarFileError(file_path, str(e), e) from e

        self.logger.debug(
            f"{file_path.name}: {len(definition.terms)} term(s), "
            f"{len(definition.keywords)} keyword(s)"
        )
        return definition

    def build(
        self,
        definition: GrammarDefinition,
        max_workers: int = DEFAULT_MAX_WORKERS,
        tiebreaker: Union[TiebreakerType, str] = DEFAULT_TIEBREAKER
    ) -> TermAggregator:
        """
        Build a TermAggregator from a grammar definition.

        Keywords are created once and shared between the terms using them.
        Terms are registered in declaration order.

        Raises:
            GrammarError: If a verifier is unknown or a pattern is invalid
        """
        keywords = {}
        for name, keyword_def in definition.keywords.items():
            verifier = None
            if keyword_def.verify is not None:
                verifier = resolve_verifier(keyword_def.verify, self.verifiers)
            keywords[name] = Keyword(
                name=name,
                pattern=keyword_def.pattern,
                verifier=verifier,
                weigher=keyword_def.weight,
            )

        terms = {}
        for name, term_def in definition.terms.items():
            matcher = KeywordMatcher(
                [(keywords[slot.keyword], slot.occurrence) for slot in term_def.keywords],
                separator=term_def.separator or self.default_separator,
                any_must_match=term_def.any_must_match,
            )
            terms[Term(name=name, weigher=term_def.weight)] = matcher

        return TermAggregator(terms, max_workers=max_workers, tiebreaker=tiebreaker)

    def load_aggregator(
        self,
        max_workers: int = DEFAULT_MAX_WORKERS,
        tiebreaker: Union[TiebreakerType, str] = DEFAULT_TIEBREAKER
    ) -> TermAggregator:
        """Load every grammar file and build one aggregator from them."""
        return self.build(self.load_all(), max_workers=max_workers, tiebreaker=tiebreaker)

    def clear_cache(self) -> None:
        """Clear the definition cache."""
        self._definition_cache = None
        self.logger.debug("Grammar cache cleared")


__all__ = ['GrammarLoader']

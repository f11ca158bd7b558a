"""
TermTip Glossary Manager
Loads glossary sources and answers term queries on top of the matcher
"""

import csv
import io
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import yaml

from .config import TermTipConfig, default_config
from .dictionary import TermDictionary, normalize_term
from .exceptions import GlossaryLoadError
from .matcher import Matcher, Segment, reconstruct

logger = logging.getLogger(__name__)

# Embedded glossary of fashion terms
FASHION_GLOSSARY_YAML = """
# Silhouettes & Cuts
silhouette: "The overall outline or shape of a garment."
bespoke: "Clothing made to an individual buyer's specifications; custom-made."
bias cut: "Fabric cut at a 45-degree angle to the grain, allowing it to drape softly over the body's curves."
peplum: "A short, gathered or pleated strip of fabric attached at the waist of a woman's jacket, dress, or blouse."
empire waist: "A fitted bodice ending just below the bust, giving a high-waisted appearance."
drop waist: "A waistline that sits below the natural waist, often at the hips."
a-line: "A silhouette that is narrower at the top and flares gently wider toward the bottom."
wrap dress: "A dress with a front closure formed by wrapping one side across the other and tying at the waist."
little black dress: "A simple, versatile black evening or cocktail dress, often cut short."

# Footwear & Accessories
chukka: "A specific variation of ankle-high boots usually made from suede or leather with open lacing."
loafer: "A slip-on shoe with no laces, often featuring a low heel and moccasin-like construction."
sneaker: "A shoe designed primarily for sports or physical exercise, but mostly used for everyday casual wear."
brogue: "A low-heeled shoe or boot characterized by sturdy leather uppers with decorative perforations (broguing)."
espadrille: "A casual shoe with a canvas or cotton fabric upper and a flexible sole made of esparto rope."
oxford: "A classic dress shoe with closed lacing, where the eyelet tabs are attached under the vamp."
derby: "A boot or shoe with open lacing, meaning that the eyelets are sewn on top of the vamp."
chelsea boot: "A close-fitting, ankle-high boot with an elastic side panel."
mule: "A shoe that has no back or constraint around the foot's heel."

# Tops & Jackets
blazer: "A structured jacket resembling a suit jacket but cut more casually."
tunic: "A loose garment, typically sleeveless and reaching to the knees, as worn in ancient Greece and Rome."
cardigan: "A knitted sweater opening down the front, typically with buttons."
bomber jacket: "A short jacket gathered at the waist and cuffs by elasticated bands and typically having a zip front."
trench coat: "A loose-belted, double-breasted raincoat in a military style."
camisole: "A loose-fitting sleeveless undergarment or top for women, typically with thin straps."

# Bottoms & Dresses
culottes: "Women's knee-length trousers, cut with full legs to resemble a skirt."
chino: "Casual trousers made from chino cloth, a twill fabric, typically khaki-colored."
palazzo: "Long women's trousers cut with a loose, extremely wide leg that flares out from the waist."
pencil skirt: "A slim-fitting skirt with a straight, narrow cut."
sheath dress: "A fitted, straight-cut dress, often without a waist seam."

# Fabrics & Materials
cashmere: "A soft, fine wool obtained from the cashmere goat."
bouclé: "A yarn with a looped or curled ply, or the fabric made from this yarn."
brocade: "A rich fabric, usually silk, woven with a raised pattern, typically with gold or silver thread."
chambray: "A lightweight clothing fabric with colored warp and white filling yarns."
organza: "A thin, stiff, transparent fabric made of silk or a synthetic yarn."
taffeta: "A crisp, smooth, plain-woven fabric with a slight sheen."
tweed: "A rough-surfaced woolen cloth, typically of mixed flecked colors."

# Styles & Aesthetics
old money: "A style characterized by understated luxury, classic pieces, and high-quality materials without overt logos."
avant-garde: "Experimental, innovative, or unorthodox concepts in fashion."
haute couture: "Expensive, fashionable clothes produced by leading fashion houses."
minimalist: "A style focused on clean lines, simple geometric shapes, and a lack of decorative detail."
eclectic: "A style that derives ideas, style, or taste from a broad and diverse range of sources."
bohemian: "Unconventional and artistic style, often involving loose, flowing fabrics and colorful patterns."
preppy: "A classic, neat style inspired by the clothing of American preparatory schools."
streetwear: "Casual clothing of a style worn especially by members of various urban youth subcultures."
utilitarian: "Fashion that prioritizes function, practicality, and comfort."
monochrome: "An outfit consisting of pieces of one single color or shades of that color."

# Techniques & Details
"trompe-l'œil": "Visual illusion in art or fashion, used to trick the eye into perceiving a painted detail as a three-dimensional object."
appliqué: "Ornamental needlework in which pieces of fabric are sewn or stuck onto a large piece of fabric to form a picture or pattern."
embroidery: "The art or process of forming decorative designs with hand or machine needlework."
pleating: "A type of fold formed by doubling fabric back upon itself and securing it in place."
ruching: "A gathering of fabric or ribbon to produce a ripple or ruffle effect."

# Industry Terms
atelier: "A workshop or studio, especially one used by an artist or fashion designer."
capsule wardrobe: "A collection of a few essential items of clothing that do not go out of fashion."
prêt-à-porter: "Designer clothes sold ready-to-wear rather than made to measure."
sartorial: "Relating to tailoring, clothes, or style of dress."
texture: "The perceived surface quality of a garment or fabric."
"""

GLOSSARY_SUFFIXES = {".yaml", ".yml", ".json"}


def _coerce_entries(data, source: str) -> List[Tuple[str, str]]:
    """Turn parsed glossary data into (term, definition) pairs"""
    if data is None:
        return []

    if isinstance(data, dict):
        items = list(data.items())
    elif isinstance(data, list):
        items = []
        for index, item in enumerate(data):
            if not isinstance(item, dict) or "term" not in item or "definition" not in item:
                raise GlossaryLoadError(f"{source}: entry {index} must have 'term' and 'definition'")
            items.append((item["term"], item["definition"]))
    else:
        raise GlossaryLoadError(f"{source}: expected a mapping or a list of entries")

    entries = []
    for term, definition in items:
        if not isinstance(term, str) or not isinstance(definition, str):
            raise GlossaryLoadError(f"{source}: term {term!r} must map to a text definition")
        entries.append((term, definition))
    return entries


def load_glossary_file(path) -> List[Tuple[str, str]]:
    """
    Read glossary entries from a YAML or JSON file

    Args:
        path: File holding either a term -> definition mapping or a list
            of {term, definition} objects

    Returns:
        List of (term, definition) tuples in file order
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix not in GLOSSARY_SUFFIXES:
        raise GlossaryLoadError(f"Unsupported glossary format: {path.name}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise GlossaryLoadError(f"Glossary file not found: {path}") from e
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise GlossaryLoadError(f"Failed to read glossary {path}: {e}") from e

    entries = _coerce_entries(data, str(path))
    logger.info(f"Read {len(entries)} terms from {path}")
    return entries


def builtin_entries() -> List[Tuple[str, str]]:
    """Entries of the embedded fashion glossary"""
    return _coerce_entries(yaml.safe_load(FASHION_GLOSSARY_YAML), "builtin glossary")


class Glossary:
    """
    Glossary of domain terms with tooltip segmentation
    """

    def __init__(self,
                 custom_terms: Optional[Dict[str, str]] = None,
                 include_builtin: bool = True,
                 extra_files: Iterable[str] = ()):
        """
        Initialize glossary

        Args:
            custom_terms: Optional terms to add/override, applied last
            include_builtin: Start from the embedded fashion glossary
            extra_files: YAML/JSON glossary files applied after the builtin terms
        """
        entries: List[Tuple[str, str]] = []

        if include_builtin:
            entries.extend(builtin_entries())

        for path in extra_files:
            entries.extend(load_glossary_file(path))

        if custom_terms:
            entries.extend(custom_terms.items())

        self.dictionary = TermDictionary.build(entries)
        self.matcher = Matcher(self.dictionary)

        logger.info(f"Loaded glossary with {len(self.dictionary)} terms")

    @classmethod
    def from_config(cls, config: TermTipConfig) -> 'Glossary':
        """Build a glossary from the glossary section of a config"""
        return cls(include_builtin=config.glossary.include_builtin,
                   extra_files=config.glossary.extra_files)

    def segment(self, text: str) -> List[Segment]:
        """Split text into plain and term segments"""
        return self.matcher.segment(text)

    @staticmethod
    def reconstruct(segments: Iterable[Segment]) -> str:
        return reconstruct(segments)

    def extract_terms(self, text: str) -> List[Tuple[str, str]]:
        """
        Extract all glossary terms found in text

        Args:
            text: Input text

        Returns:
            List of (term as written, definition) tuples, first occurrence
            of each key only
        """
        found_terms = []
        seen = set()

        for term in self.matcher.find_terms(text):
            # Skip if already found
            if term.key in seen:
                continue
            seen.add(term.key)
            found_terms.append((term.text, term.definition))

        return found_terms

    def get_definition(self, term: str) -> Optional[str]:
        """
        Get definition for a specific term

        Args:
            term: Term to look up, in any casing or spacing

        Returns:
            Definition or None if not found
        """
        return self.dictionary.lookup(normalize_term(term))

    def search_terms(self, query: str) -> List[Tuple[str, str]]:
        """
        Search for terms containing query string

        Args:
            query: Search query

        Returns:
            List of (term, definition) tuples, best matches first
        """
        query_lower = normalize_term(query)
        if not query_lower:
            return []

        results = [
            (term, definition) for term, definition in self.dictionary.items()
            if query_lower in term or query_lower in definition.lower()
        ]

        # Sort by relevance
        def sort_key(item):
            term, definition = item

            # Exact match gets highest priority
            if term == query_lower:
                rank = 0
            # Term starts with query
            elif term.startswith(query_lower):
                rank = 1
            # Query in term
            elif query_lower in term:
                rank = 2
            # Query in definition
            else:
                rank = 3
            return (rank, len(term), term)

        results.sort(key=sort_key)

        return results

    def export_glossary(self, format: str = "json") -> str:
        """
        Export glossary in different formats

        Args:
            format: Export format ("json", "yaml", "csv")

        Returns:
            Formatted glossary string
        """
        terms = dict(sorted(self.dictionary.items()))

        if format == "json":
            return json.dumps(terms, indent=2, ensure_ascii=False)

        elif format == "yaml":
            return yaml.safe_dump(terms, default_flow_style=False, allow_unicode=True, sort_keys=True)

        elif format == "csv":
            buffer = io.StringIO()
            writer = csv.writer(buffer, lineterminator="\n")
            writer.writerow(["term", "definition"])
            writer.writerows(terms.items())
            return buffer.getvalue()

        else:
            raise ValueError(f"Unknown format: {format}")

    def get_stats(self) -> Dict[str, int]:
        """Get statistics about the glossary"""
        multi_word = sum(1 for term in self.dictionary if " " in term)

        return {
            'total_terms': len(self.dictionary),
            'single_word_terms': len(self.dictionary) - multi_word,
            'multi_word_terms': multi_word,
            'max_phrase_length': self.dictionary.max_phrase_length(),
            'duplicates_replaced': len(self.dictionary.duplicates),
        }


@lru_cache(maxsize=1)
def get_default_glossary() -> Glossary:
    """
    Process-wide glossary built from default_config

    Built on first call and shared read-only afterwards.
    """
    return Glossary.from_config(default_config)

"""
Extract configuration registry.

The UK preparation combines three ESS round 7 files:

- responses: the integrated interview file (one row per respondent)
- sample: the sample design data file (PSU, stratum, inclusion probability)
- paradata: the contact form file (one row per sampled unit, including
  non-respondents), with the final contact outcome and interviewer
  observations of the neighbourhood

EXTRACT_REGISTRY is the single source of truth for which columns are taken
from each file and how they are typed.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..processing.recode import AlcoholFrequency, SmokingStatus
from ..schema import ColumnSpec, categorical, identifier, numeric


@dataclass(frozen=True)
class ExtractConfig:
    """
    Immutable configuration for one source extract.

    Attributes:
        name: Short name used in messages ('responses', 'sample', 'paradata')
        description: Human-readable description
        file_patterns: Glob patterns tried in order inside raw_data_dir
        id_col: Unit identifier column
        country_col: Column holding the country
        columns: Ordered column specs of the analysis variables to keep
    """
    name: str
    description: str
    file_patterns: Tuple[str, ...]
    columns: Tuple[ColumnSpec, ...]
    id_col: str = 'idno'
    country_col: str = 'cntry'

    def get_file_patterns(self) -> List[str]:
        return list(self.file_patterns)

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    @property
    def required_columns(self) -> List[str]:
        """Columns that must exist in the raw file: the selection plus the country."""
        names = self.column_names
        if self.country_col not in names:
            names = names + [self.country_col]
        return names


# =============================================================================
# EXTRACT REGISTRY
# =============================================================================

# ESS non-response codes of the open quantity questions: Not applicable,
# Refusal, Don't know, No answer
QUANTITY_MISSING_3 = (666, 777, 888, 999)
QUANTITY_MISSING_4 = (6666, 7777, 8888, 9999)

EXTRACT_REGISTRY: Dict[str, ExtractConfig] = {

    'paradata': ExtractConfig(
        name='paradata',
        description='ESS7 contact form data',
        file_patterns=('ESS7CF*.sav', 'ESS7CF*.dta', '*contact*.csv', 'paradata*.csv'),
        columns=(
            identifier('idno'),
            categorical('outnic'),
            categorical('physa'),
            categorical('littera'),
            categorical('vandaa'),
        ),
    ),

    'sample': ExtractConfig(
        name='sample',
        description='ESS7 sample design data file',
        file_patterns=('ESS7SDDF*.sav', 'ESS7SDDF*.dta', '*sddf*.csv', 'sample*.csv'),
        columns=(
            identifier('idno'),
            numeric('psu'),
            numeric('stratum'),
            numeric('prob'),
        ),
    ),

    'responses': ExtractConfig(
        name='responses',
        description='ESS7 integrated interview data',
        file_patterns=('ESS7e*.sav', 'ESS7e*.dta', 'responses*.csv'),
        columns=(
            identifier('idno'),
            categorical('cgtsmke', [s.value for s in SmokingStatus], missing_codes=(7, 8, 9)),
            numeric('cgtsday', missing_codes=QUANTITY_MISSING_3),
            categorical('alcfreq', [f.value for f in AlcoholFrequency], missing_codes=(77, 88, 99)),
            numeric('alcwkdy', missing_codes=QUANTITY_MISSING_4),
            numeric('alcwknd', missing_codes=QUANTITY_MISSING_4),
            categorical('gndr', missing_codes=(9,)),
            numeric('agea', missing_codes=(999,)),
            categorical('eisced', missing_codes=(77, 88, 99)),
            numeric('lrscale', missing_codes=(77, 88, 99)),
        ),
    ),
}


def get_extract_config(name: str) -> ExtractConfig:
    if name not in EXTRACT_REGISTRY:
        available = ', '.join(sorted(EXTRACT_REGISTRY.keys()))
        raise KeyError(f"Unknown extract: '{name}'. Available: {available}")
    return EXTRACT_REGISTRY[name]


def list_extracts() -> List[str]:
    return list(EXTRACT_REGISTRY.keys())


def list_extracts_detailed() -> str:
    """Return formatted string with all extracts and their columns."""
    lines = ["Configured Extracts:", "=" * 50]
    for name, config in EXTRACT_REGISTRY.items():
        lines.append(f"\n{name}:")
        lines.append(f"  Description: {config.description}")
        lines.append(f"  Files: {', '.join(config.file_patterns)}")
        lines.append(f"  ID Column: {config.id_col}")
        lines.append(f"  Columns: {', '.join(config.column_names)}")
    return '\n'.join(lines)

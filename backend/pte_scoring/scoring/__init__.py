from .aggregator import ScoreAggregator, ScoringConfig
from .connectors import ConnectorDetector
from .engine import ScoringEngine, default_engine
from .form import FormValidator
from .grader import grade
from .grammar import GrammarRuleEngine
from .models import KeyElements, Passage, ScoreResult
from .overlap import SemanticOverlapScorer
from .spelling import SpellChecker
from .stemmer import stem
from .thesaurus import Thesaurus

__all__ = [
	"ConnectorDetector",
	"FormValidator",
	"GrammarRuleEngine",
	"KeyElements",
	"Passage",
	"ScoreAggregator",
	"ScoreResult",
	"ScoringConfig",
	"ScoringEngine",
	"SemanticOverlapScorer",
	"SpellChecker",
	"Thesaurus",
	"default_engine",
	"grade",
	"stem",
]

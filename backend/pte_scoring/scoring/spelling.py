from __future__ import annotations
import re
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Optional, Set

from .models import SpellingError


_TOKEN_RE = re.compile(r"[A-Za-z0-9']+")

# Frequent misspellings in learner writing, mapped to the intended word
COMMON_MISSPELLINGS: Mapping[str, str] = MappingProxyType({
	"recieve": "receive",
	"recieved": "received",
	"beleive": "believe",
	"belive": "believe",
	"acheive": "achieve",
	"acheived": "achieved",
	"occured": "occurred",
	"occurence": "occurrence",
	"occuring": "occurring",
	"seperate": "separate",
	"seperately": "separately",
	"definately": "definitely",
	"definitly": "definitely",
	"goverment": "government",
	"govenment": "government",
	"enviroment": "environment",
	"enviromental": "environmental",
	"enviornment": "environment",
	"untill": "until",
	"wich": "which",
	"whith": "with",
	"becuase": "because",
	"beacuse": "because",
	"becasue": "because",
	"thier": "their",
	"alot": "a lot",
	"accomodate": "accommodate",
	"accomodation": "accommodation",
	"adress": "address",
	"arguement": "argument",
	"begining": "beginning",
	"buisness": "business",
	"bussiness": "business",
	"calender": "calendar",
	"commitee": "committee",
	"completly": "completely",
	"concious": "conscious",
	"critisism": "criticism",
	"developement": "development",
	"dilemna": "dilemma",
	"dissapear": "disappear",
	"dissapoint": "disappoint",
	"embarass": "embarrass",
	"existance": "existence",
	"familar": "familiar",
	"finaly": "finally",
	"foriegn": "foreign",
	"fourty": "forty",
	"freind": "friend",
	"futher": "further",
	"gaurd": "guard",
	"grammer": "grammar",
	"happend": "happened",
	"immediatly": "immediately",
	"independant": "independent",
	"interupt": "interrupt",
	"knowlege": "knowledge",
	"liason": "liaison",
	"libary": "library",
	"lisence": "licence",
	"maintainance": "maintenance",
	"millenium": "millennium",
	"mispell": "misspell",
	"neccessary": "necessary",
	"necesary": "necessary",
	"noticable": "noticeable",
	"ocasion": "occasion",
	"oppurtunity": "opportunity",
	"oportunity": "opportunity",
	"paralel": "parallel",
	"particulary": "particularly",
	"persue": "pursue",
	"posession": "possession",
	"prefered": "preferred",
	"presance": "presence",
	"probaly": "probably",
	"publically": "publicly",
	"realy": "really",
	"recomend": "recommend",
	"reccomend": "recommend",
	"refered": "referred",
	"relevent": "relevant",
	"religous": "religious",
	"remeber": "remember",
	"resistence": "resistance",
	"responsability": "responsibility",
	"rythm": "rhythm",
	"sieze": "seize",
	"similiar": "similar",
	"sucess": "success",
	"succesful": "successful",
	"successfull": "successful",
	"supercede": "supersede",
	"suprise": "surprise",
	"tendancy": "tendency",
	"therfore": "therefore",
	"tommorow": "tomorrow",
	"tounge": "tongue",
	"truely": "truly",
	"unfortunatly": "unfortunately",
	"usualy": "usually",
	"wierd": "weird",
	"writting": "writing",
	"youre": "you're",
	"populaton": "population",
	"signficant": "significant",
	"significent": "significant",
	"increse": "increase",
	"decrese": "decrease",
	"reserch": "research",
	"resarch": "research",
	"technolgy": "technology",
	"techology": "technology",
	"ecomony": "economy",
	"envolve": "involve",
	"benifit": "benefit",
	"benifits": "benefits",
	"consequense": "consequence",
	"eventhough": "even though",
	"howver": "however",
	"althought": "although",
	"wheras": "whereas",
	"furthur": "further",
	"moreso": "more so",
})

# Everyday vocabulary that is never flagged
COMMON_VOCABULARY: FrozenSet[str] = frozenset("""
the and for are but not you all any can had her was one our out day get has him his how man new now old see two way who boy did its let put say she too use
that with have this will your from they know want been good much some time very when come here just like long make many more only over such take than them well were
what where which while who whom whose why about above after again against also although among another around because before being below between both could
during each either enough even every first found further however into itself later least less little most much must never next often once other others
should since still their there these thing things those though through today together under until upon used using usually whereas whether without would
yet year years people world life work works working worked number part parts place places case cases point points group groups problem problems fact facts
example examples result results reason reasons change changes changed changing increase increased increases increasing decrease decreased decline declined
rise rising rose grow growing growth fall falling fell rate rates level levels high higher highest low lower lowest large larger largest small smaller smallest
important importance significant significantly major key main central critical essential crucial necessary possible likely unlikely different similar
research researchers study studies studied survey data evidence analysis findings report reports reported suggest suggests suggested show shows showed shown
indicate indicates indicated reveal reveals revealed argue argues argued claim claims claimed believe believes believed think thinks thought consider considered
however therefore moreover furthermore consequently nevertheless nonetheless despite whereas although because since thus hence instead meanwhile otherwise
government governments economy economic economies social society public private policy policies country countries nation national international global world
environment environmental climate pollution energy health healthy education educational school schools student students children child young youth adults
unemployment employment jobs job workers worker business businesses company companies industry industries market markets money cost costs price prices
technology technologies digital internet online media information communication science scientific scientists system systems process processes develop
development developed developing developments improve improved improvement provide provided provides support supported effect effects impact impacts affect
affected cause caused causes lead leads leading led result resulted benefit benefits advantage advantages disadvantage disadvantages risk risks issue issues
challenge challenges solution solutions approach approaches strategy strategies measure measures author authors passage text summary argument arguments
conclusion conclude concludes concluded overall ultimately finally addition additional particular particularly especially generally specifically rather
receive received achieve achieved believe occurred separate definitely environment until which with their necessary beginning business successful
""".split())


class SpellChecker:
	"""Dictionary-driven spell checker.

	Only known misspellings are reported. Words outside both dictionaries pass
	silently so that uncommon but correct vocabulary is not penalised.
	"""

	def __init__(self, misspellings: Optional[Mapping[str, str]] = None, common_words: Optional[Iterable[str]] = None) -> None:
		self._misspellings: Mapping[str, str] = MappingProxyType(dict(misspellings if misspellings is not None else COMMON_MISSPELLINGS))
		self._common: FrozenSet[str] = frozenset(common_words if common_words is not None else COMMON_VOCABULARY)

	def check(self, text: str) -> List[SpellingError]:
		errors: List[SpellingError] = []
		if not isinstance(text, str):
			return errors
		seen: Set[str] = set()
		for raw in _TOKEN_RE.findall(text):
			word = raw.lower().strip("'")
			if len(word) <= 2 or word in seen:
				continue
			seen.add(word)
			if word.isdigit() or word in self._common:
				continue
			suggestion = self._misspellings.get(word)
			if suggestion:
				errors.append(SpellingError(word=word, suggestion=suggestion, confidence="high"))
		return errors


SPELL_CHECKER = SpellChecker()

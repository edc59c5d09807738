import re
from types import MappingProxyType

CARE_INSTRUCTIONS = (
    (("rinse",), "rinse before recycling"),
    (("flatten",), "flatten"),
    (("empty",), "empty completely"),
    (("clean",), "must be clean"),
    (("dry",), "keep dry"),
    (("remove", "cap"), "remove caps"),
    (("remove", "lid"), "remove lids"),
    (("label",), "labels OK"),
)

TIP_PATTERNS = [
    (r"rinse", "Rinse containers before recycling"),
    (r"flatten.*cardboard|cardboard.*flatten", "Flatten cardboard boxes"),
    (r"empty", "Empty containers completely"),
    (r"clean.*dry|dry.*clean", "Keep recyclables clean and dry"),
    (r"remove.*(cap|lid)", "Remove caps and lids"),
    (r"no.*bag|don't.*bag|loose", "Place recyclables loose in bin, not in bags"),
    (r"label", "Labels can stay on containers"),
]

COMPILED_TIP_PATTERNS = tuple((re.compile(p, re.IGNORECASE), tip) for p, tip in TIP_PATTERNS)

TITLE_CITY_STATE_PATTERN = re.compile(r"\|\s*([A-Za-z\s]+,\s*[A-Z]{2})\s*$")
TITLE_PLACE_PATTERN = re.compile(r"([A-Za-z\s]+(?:City|County|Town|Village|Borough))", re.IGNORECASE)
URL_PLACE_PATTERN = re.compile(
    r"(?:www\.)?([a-z]+)(?:city|county|town|village)?\.(gov|org)", re.IGNORECASE
)
CAMEL_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")

# Municipal domains usually glue multi-word city names together.
CITY_NAME_CORRECTIONS = MappingProxyType({
    "beverlyhills": "Beverly Hills",
    "losangeles": "Los Angeles",
    "newyork": "New York",
    "sanfrancisco": "San Francisco",
    "sandiego": "San Diego",
    "santamonica": "Santa Monica",
    "longbeach": "Long Beach",
})

ZIP_CODE_PATTERN = re.compile(r"^\d{5}$")

SINGLE_SOURCE_NOTE = "Verify with local guidelines"
MULTI_SOURCE_DEFAULT_NOTE = "Confirmed by multiple sources"
SINGLE_SOURCE_DEFAULT_NOTE = "Verify with source"
NOT_ACCEPTED_DEFAULT_NOTE = "Check local guidelines for disposal"
PLACEHOLDER_MATERIAL = "See sources below"
PLACEHOLDER_NOTE = "Could not extract specific materials"
NOT_ACCEPTED_REASON = "Not accepted in curbside recycling"
UNKNOWN_MATERIAL_REASON = "Material not recognized - check local guidelines"

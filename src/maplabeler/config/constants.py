"""Constants shared by the rendering, status and template services."""

# Separator placed between alternative map forms. A label containing it has
# not been resolved to a single rendering yet.
MULTIPLE_SEPARATOR = "——"

# Marker that ends tag-rule processing early when it appears in a result
TAG_RULE_STOP = "⏹"

# Word characters: letters, combining marks, format characters and hyphen.
# Native \w misses marks and format characters used by many scripts.
WORD_CLASS = r"[\p{L}\p{M}\p{Cf}-]"
NON_WORD_CLASS = r"[^\p{L}\p{M}\p{Cf}-]"

# Boundary assertions built from the same class (not \b)
MATCH_PRE_B = rf"(?<={NON_WORD_CLASS}|^)"
MATCH_POST_B = rf"(?=$|{NON_WORD_CLASS})"

# Default tag rules installed when a project does not define its own
DEFAULT_TAG_RULES: dict[str, list[list[str]]] = {
    "q": [["$", "?"]],
}

# Standard book codes in canonical order (3-digit book numbers are 1-based
# indexes into this list)
BOOK_CODES = [
    "GEN", "EXO", "LEV", "NUM", "DEU", "JOS", "JDG", "RUT", "1SA", "2SA",
    "1KI", "2KI", "1CH", "2CH", "EZR", "NEH", "EST", "JOB", "PSA", "PRO",
    "ECC", "SNG", "ISA", "JER", "LAM", "EZK", "DAN", "HOS", "JOL", "AMO",
    "OBA", "JON", "MIC", "NAM", "HAB", "ZEP", "HAG", "ZEC", "MAL", "MAT",
    "MRK", "LUK", "JHN", "ACT", "ROM", "1CO", "2CO", "GAL", "EPH", "PHP",
    "COL", "1TH", "2TH", "1TI", "2TI", "TIT", "PHM", "HEB", "JAS", "1PE",
    "2PE", "1JN", "2JN", "3JN", "JUD", "REV", "TOB", "JDT", "ESG", "WIS",
    "SIR", "BAR", "LJE", "S3Y", "SUS", "BEL", "1MA", "2MA", "3MA", "4MA",
    "1ES", "2ES", "MAN", "PS2", "ODA", "PSS",
]

# Digit glyphs for the writing scripts a project may select
DIGIT_SCRIPTS: dict[str, list[str]] = {
    "Arab": ["٠", "١", "٢", "٣", "٤", "٥", "٦", "٧", "٨", "٩"],
    "Beng": ["০", "১", "২", "৩", "৪", "৫", "৬", "৭", "৮", "৯"],
    "Deva": ["०", "१", "२", "३", "४", "५", "६", "७", "८", "९"],
    "Gujr": ["૦", "૧", "૨", "૩", "૪", "૫", "૬", "૭", "૮", "૯"],
    "Guru": ["੦", "੧", "੨", "੩", "੪", "੫", "੬", "੭", "੮", "੯"],
    "Knda": ["೦", "೧", "೨", "೩", "೪", "೫", "೬", "೭", "೮", "೯"],
    "Khmr": ["០", "១", "២", "៣", "៤", "៥", "៦", "៧", "៨", "៩"],
    "Laoo": ["໐", "໑", "໒", "໓", "໔", "໕", "໖", "໗", "໘", "໙"],
    "Limb": ["᥆", "᥇", "᥈", "᥉", "᥊", "᥋", "᥌", "᥍", "᥎", "᥏"],
    "Mlym": ["൦", "൧", "൨", "൩", "൪", "൫", "൬", "൭", "൮", "൯"],
    "Mong": ["᠐", "᠑", "᠒", "᠓", "᠔", "᠕", "᠖", "᠗", "᠘", "᠙"],
    "Mymr": ["၀", "၁", "၂", "၃", "၄", "၅", "၆", "၇", "၈", "၉"],
    "Orya": ["୦", "୧", "୨", "୩", "୪", "୫", "୬", "୭", "୮", "୯"],
    "Taml": ["௦", "௧", "௨", "௩", "௪", "௫", "௬", "௭", "௮", "௯"],
    "Telu": ["౦", "౧", "౨", "౩", "౪", "౫", "౬", "౭", "౮", "౯"],
    "Thai": ["๐", "๑", "๒", "๓", "๔", "๕", "๖", "๗", "๘", "๙"],
    "Tibt": ["༠", "༡", "༢", "༣", "༤", "༥", "༦", "༧", "༨", "༩"],
    "Aran": ["٠", "١", "٢", "٣", "۴", "۵", "۶", "٧", "٨", "٩"],
    "Arabext": ["۰", "۱", "۲", "۳", "۴", "۵", "۶", "۷", "۸", "۹"],
}

VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"
DESCRIPTION = "A getopt_long style command-line tokenizer"

# How many "did you mean" candidates an unknown long option reports
MAX_SUGGESTIONS = 5

YELLOW = "\033[33m"
CYAN = "\033[36m"
RESET = "\033[0m"

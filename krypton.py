#!/usr/bin/env python3
"""
Krypton v1.0.0 - Terminal Cryptocurrency Price Checker
"""

import os
import time

import colorama
import requests
from fuzzywuzzy import fuzz
from fuzzywuzzy import process

# --- COLOR HANDLING ---
class Colors:
    # Standard ANSI colors for maximum compatibility
    RED = '\033[31m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    PURPLE = '\033[35m'
    GRAY = '\033[90m'
    BOLD = '\033[1m'
    ITALIC = '\033[3m'
    INVERSE = '\033[7m'
    END = '\033[0m'

    # Bright versions for better visibility
    BRIGHT_RED = '\033[91m'
    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_PURPLE = '\033[95m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'

    @staticmethod
    def init_colors():
        """Enables ANSI escape handling on Windows consoles."""
        if os.name == 'nt':
            colorama.init()

# Initialize colors as early as possible
Colors.init_colors()


# --- SELECTION REGISTRY ---
OTHERS = 'others'
DEFAULT_SELECTION = 'btc'

SELECTIONS = (
    (OTHERS, 'Others'),
    ('btc', 'BTC'),
    ('eth', 'ETH'),
    ('avax', 'AVAX'),
    ('luna', 'Luna'),
    ('xrp', 'XRP'),
    ('doge', 'Doge🐕'),
)


def selection_labels():
    """Returns the menu labels in registry order."""
    return [label for _, label in SELECTIONS]


def find_key(label):
    """Returns the ticker key registered for a menu label, or None."""
    for key, value in SELECTIONS:
        if value == label:
            return key
    return None


def find_label(key):
    for value, label in SELECTIONS:
        if value == key:
            return label
    return None


# --- FETCH OUTCOMES ---
SUCCESS = 'success'
HTTP_ERROR = 'http_error'
NETWORK_ERROR = 'network_error'

# Cosmetic pauses (seconds)
BANNER_PAUSE = 0.02
INSTRUCTION_PAUSE = 0.1
SPINNER_PAUSE = 0.01


# --- RESPONSE FORMATTING ---
def format_price(price_usd):
    return f" {price_usd:.4f} USD "


def format_price_change(price_change):
    """
    Formats the 24h percent change with a direction arrow.
    The direction is decided on the two-decimal string, so -0.001 renders
    as an upward "-0.00".
    """
    formatted = f"{price_change:.2f}"
    if float(formatted) < 0:
        return f"{Colors.BOLD}{Colors.BRIGHT_RED}⬇{formatted}% (24h){Colors.END}"
    return f"{Colors.BOLD}{Colors.BRIGHT_GREEN}⬆{formatted}% (24h){Colors.END}"


def format_market_data(payload):
    """
    Renders a Messari market-data payload into a single display line:
    name and symbol, price in USD and the 24h change.
    Missing fields raise KeyError; nothing here is guarded.
    """
    data = payload['data']
    symbol = data['symbol']
    name = data['name']
    market_data = data['market_data']
    price_usd = market_data['price_usd']
    price_change = market_data['percent_change_usd_last_24_hours']

    label = f"{name} ({symbol})"
    return (f"{Colors.BOLD}{Colors.BRIGHT_YELLOW}{label}{Colors.END} - "
            f"{Colors.INVERSE}{format_price(price_usd)}{Colors.END} "
            f"{format_price_change(price_change)}")


# --- STATUS INDICATOR ---
class StatusIndicator:
    """Progress line shown while a price request is in flight."""

    def __init__(self, text):
        self.text = text

    def start(self):
        print(f"{Colors.ITALIC}{Colors.BRIGHT_GREEN}[-] {self.text}{Colors.END}")
        time.sleep(SPINNER_PAUSE)
        return self

    def success(self, text):
        print(f"{Colors.BRIGHT_GREEN}[+]{Colors.END} {text}")

    def error(self, text):
        print(f"{Colors.BRIGHT_RED}[-] {text}{Colors.END}")


class Krypton:
    def __init__(self, base_url="https://data.messari.io/api/v1", timeout=None):
        self.base_url = base_url
        # None keeps the request unbounded
        self.timeout = timeout
        self.lookup_count = 0

    def print_banner(self):
        """Prints the welcome banner with a pastel gradient, one color per line."""
        banner = r'''
 __        __   _                            _
 \ \      / /__| | ___ ___  _ __ ___   ___  | |_ ___
  \ \ /\ / / _ \ |/ __/ _ \| '_ ` _ \ / _ \ | __/ _ \
   \ V  V /  __/ | (_| (_) | | | | | |  __/ | || (_) |
    \_/\_/ \___|_|\___\___/|_| |_| |_|\___|  \__\___/
  _  __                 _
 | |/ /_ __ _   _ _ __ | |_ ___  _ __
 | ' /| '__| | | | '_ \| __/ _ \| '_ \
 | . \| |  | |_| | |_) | || (_) | | | |
 |_|\_\_|   \__, | .__/ \__\___/|_| |_|
            |___/|_|'''
        pastel = [Colors.BRIGHT_CYAN, Colors.BRIGHT_BLUE, Colors.BRIGHT_PURPLE,
                  Colors.PURPLE, Colors.BRIGHT_RED, Colors.BRIGHT_YELLOW]
        lines = banner.splitlines()
        for i, line in enumerate(lines):
            color = pastel[i * len(pastel) // len(lines)]
            print(f"{color}{line}{Colors.END}")
        print()
        time.sleep(BANNER_PAUSE)

    def print_instructions(self):
        print(f"{Colors.BOLD}{Colors.BRIGHT_PURPLE}Select from the list or enter a name{Colors.END}")
        time.sleep(INSTRUCTION_PAUSE)

    def prompt_selection(self):
        """
        Shows the registry as a numbered menu and returns the chosen label.
        Keeps asking until a valid number is entered.
        """
        labels = selection_labels()
        options = {str(i): label for i, label in enumerate(labels, 1)}
        while True:
            print(f"\n{Colors.GRAY}{'─' * 50}{Colors.END}")
            print(f"{Colors.BOLD}{Colors.BRIGHT_WHITE}[?] Get Price for:{Colors.END}")
            for i, label in enumerate(labels, 1):
                print(f"{Colors.BRIGHT_WHITE}[{i}] {label}{Colors.END}")

            choice = input(f"\n{Colors.BRIGHT_BLUE}[>] Select option (1-{len(labels)}): {Colors.END}").strip()

            if choice in options:
                return options[choice]

            print(f"{Colors.BRIGHT_RED}[-] Invalid selection. Please choose a number between 1 and {len(labels)}.{Colors.END}")

    def ask_crypto(self):
        """Asks for a free-text ticker; empty input falls back to DEFAULT_SELECTION."""
        answer = input(f"{Colors.BRIGHT_CYAN}[?] Which token you want to search for? ({DEFAULT_SELECTION}): {Colors.END}")
        if not answer:
            return DEFAULT_SELECTION
        return answer

    def resolve_ticker(self, label):
        """
        Maps a menu label to the ticker to fetch.
        The catch-all entry asks the user for the ticker instead.
        """
        key = find_key(label)
        if key is None:
            raise LookupError(f"No registry entry for menu label {label!r}")
        if key == OTHERS:
            return self.ask_crypto()
        return key

    def suggest_tickers(self, ticker, limit=3, score_threshold=70):
        """Returns registry keys that look like a mistyped ticker."""
        keys = [key for key, _ in SELECTIONS if key != OTHERS]
        matches = process.extract(ticker.lower(), keys, scorer=fuzz.ratio, limit=limit)
        return [key for key, score in matches if score >= score_threshold]

    def fetch_price(self, ticker):
        """
        Fetches market data for one ticker and reports it on the status line.
        Returns SUCCESS, HTTP_ERROR or NETWORK_ERROR. Only transport failures
        are caught; a malformed success payload propagates to the caller.
        """
        spinner = StatusIndicator(f"Fetching price for {ticker}...").start()

        try:
            url = f"{self.base_url}/assets/{ticker}/metrics/market-data"
            response = requests.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            print(f"\n    {Colors.RED}Error: {e}{Colors.END}\n")
            return NETWORK_ERROR

        if response.status_code != 200:
            spinner.error(f"☠️ Failed to get data for {ticker}, error: {response.status_code}")
            if response.status_code == 404:
                suggestions = self.suggest_tickers(ticker)
                if suggestions:
                    print(f"{Colors.YELLOW}[?] Did you mean: {', '.join(suggestions)}{Colors.END}")
            return HTTP_ERROR

        spinner.success(format_market_data(response.json()))
        self.lookup_count += 1
        return SUCCESS

    def run_cycle(self):
        """One pass of the menu: select, resolve, fetch."""
        label = self.prompt_selection()
        ticker = self.resolve_ticker(label)
        return self.fetch_price(ticker)

    def interactive_menu(self):
        """Re-presents the menu after every fetch, whatever its outcome."""
        while True:
            self.run_cycle()

    def run(self):
        """Starts the Krypton application."""
        self.print_banner()
        self.print_instructions()
        self.interactive_menu()

def main():
    """Main function to run the Krypton application."""
    app = Krypton()
    try:
        app.run()
    except (KeyboardInterrupt, EOFError):
        print(f"\n{Colors.GRAY}[-] Session terminated by user - {app.lookup_count} prices fetched.{Colors.END}")
        print(f"{Colors.BLUE}[!] Goodbye from Krypton!{Colors.END}")
    except Exception as e:
        print(f"\n{Colors.BRIGHT_RED}[-] An unhandled system error occurred: {e!r}{Colors.END}")
        print(f"{Colors.BRIGHT_RED}[!] Please report this issue or try restarting the application.{Colors.END}")

if __name__ == "__main__":
    main()

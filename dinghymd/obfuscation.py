"""
# Dinghy-Markdown: obfuscation.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Email address obfuscation.
"""

import random
import re
from typing import Optional


ALWAYS_ENCODED_CHARACTERS = '@:'


def is_mailto_uri(uri: str) -> bool:
    return re.match(pattern='mailto:', string=uri, flags=re.IGNORECASE) is not None


def encode_email_address(address: str, random_generator: Optional[random.Random] = None) -> str:
    """
    Encode an email address to deter address-harvesting bots.

    Each character is rendered, at random, as itself, a decimal entity, or a hexadecimal entity.
    `@` and `:` are never rendered as themselves.
    The output differs from call to call; only its decoded value is stable.
    """
    if random_generator is None:
        randrange = random.randrange
    else:
        randrange = random_generator.randrange

    encoded_characters = []
    for character in address:
        if character in ALWAYS_ENCODED_CHARACTERS:
            choice = randrange(1, 3)
        else:
            choice = randrange(3)

        if choice == 0:
            encoded_characters.append(character)
        elif choice == 1:
            encoded_characters.append(f'&#{ord(character)};')
        else:
            encoded_characters.append(f'&#x{ord(character):X};')

    return ''.join(encoded_characters)

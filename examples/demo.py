"""
vigenere_vernam — Live Demo
===========================
Run:  python examples/demo.py [PLAINTEXT]

Validates a plaintext, generates a one-time secret as long as it,
encrypts, decrypts, and prints every step. A second pass shows a custom
alphabet whose symbols are two-letter syllables.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_vernam import VigenereCipher, VigenereError

LINE = "═" * 70


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)


def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


def run(cipher: VigenereCipher, plaintext: str):
    if not cipher.validate_string(plaintext):
        cipher.ensure_valid(plaintext)   # raises with the offending symbol

    t0         = time.perf_counter()
    secret     = cipher.generate_secret_key(plaintext)
    ciphertext = cipher.encrypt(plaintext, secret)
    decrypted  = cipher.decrypt(ciphertext, secret)
    elapsed    = time.perf_counter() - t0

    ok("Valid plaintext", "True")
    ok("Plaintext",       plaintext)
    ok("Secret key",      secret)
    ok("Ciphertext",      ciphertext)
    ok("Decrypted",       decrypted)
    ok("Round-trip",      f"{elapsed*1000:.3f} ms")


def main(argv):
    logging.basicConfig(level=logging.INFO, format=" %(message)s")
    plaintext = argv[1] if len(argv) > 1 else "VIGENERECIPHER"

    header("Vigenère-Vernam — default alphabet A–Z")
    try:
        run(VigenereCipher(), plaintext)
    except VigenereError as exc:
        print(f"  ✗  {exc}")
        return 1

    header("Vigenère-Vernam — custom alphabet of two-letter syllables")
    syllables = [c + v for c in "KMNST" for v in "AIU"]
    try:
        run(VigenereCipher(syllables), "NAMITAKUSI")
    except VigenereError as exc:
        print(f"  ✗  {exc}")
        return 1

    print(f"\n{LINE}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))

"""CWE pages for missing or weak integrity checks."""

from src.core.pages import CVEReference, CWEPage, Explanation

CWE_353 = CWEPage(
    cwe_id="CWE-353",
    title="Missing Support for Integrity Check",
    best_practices=(
        "Use authenticated encryption modes (e.g., AES-GCM, ChaCha20-Poly1305) which "
        "provide confidentiality **and** integrity.",
        "If using separate primitives, follow an encrypt-then-MAC approach: first "
        "encrypt, then compute an HMAC (e.g., HMAC-SHA256) over the ciphertext.",
        "Always verify the authentication tag or MAC before decrypting or processing "
        "any plaintext.",
        "Ensure end-to-end protocols include checksums or digital signatures to "
        "detect tampering in transit.",
        "Prefer high-level libraries with built-in integrity support instead of "
        "rolling your own low-level cipher routines.",
    ),
    bad_practices=(
        "Using raw cipher modes without authentication (e.g., AES-CTR, AES-CBC "
        "without HMAC), leaving ciphertext malleable.",
        "Omitting a separate MAC or authentication tag and trusting only encryption "
        "for integrity.",
        "Decrypting before verifying integrity, exposing applications to "
        "padding-oracle or tampering attacks.",
        "Relying on protocol-level checksums (e.g., CRC32) that are not "
        "cryptographically secure.",
        "Implementing custom checksum logic instead of using proven cryptographic "
        "integrity primitives.",
    ),
    good_samples=(
        """// Good: Node.js AES-GCM with built-in integrity
import { randomBytes, createCipheriv, createDecipheriv } from 'crypto';

function encrypt(plaintext: string): Buffer {
  const key = randomBytes(32);
  const iv = randomBytes(12);
  const cipher = createCipheriv('aes-256-gcm', key, iv);
  const encrypted = Buffer.concat([cipher.update(Buffer.from(plaintext, 'utf8')), cipher.final()]);
  const tag = cipher.getAuthTag();
  return Buffer.concat([iv, tag, encrypted]);
}

function decrypt(ciphertext: Buffer, key: Buffer): string {
  const iv = ciphertext.slice(0, 12);
  const tag = ciphertext.slice(12, 28);
  const encrypted = ciphertext.slice(28);
  const decipher = createDecipheriv('aes-256-gcm', key, iv);
  decipher.setAuthTag(tag);
  const decrypted = Buffer.concat([decipher.update(encrypted), decipher.final()]);
  return decrypted.toString('utf8');
}""",
        """# Good: Python AES-GCM via cryptography
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
import os

def encrypt(data: bytes) -> bytes:
    key = AESGCM.generate_key(bit_length=256)
    aesgcm = AESGCM(key)
    iv = os.urandom(12)
    ct = aesgcm.encrypt(iv, data, None)
    return iv + ct  # ciphertext includes tag internally""",
    ),
    bad_samples=(
        """// Bad: AES-256-CTR without integrity
import { randomBytes, createCipheriv } from 'crypto';

function encrypt(plaintext: string): Buffer {
  const key = randomBytes(32);
  const iv = randomBytes(16);
  const cipher = createCipheriv('aes-256-ctr', key, iv);
  return Buffer.concat([iv, cipher.update(Buffer.from(plaintext, 'utf8')), cipher.final()]);
}""",
        """# Bad: Python AES CTR with no MAC
from Crypto.Cipher import AES
import os

def encrypt(data: bytes) -> bytes:
    key = os.urandom(16)
    cipher = AES.new(key, AES.MODE_CTR)
    return cipher.nonce + cipher.encrypt(data)  # no HMAC, no integrity""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-353",
        paragraphs=(
            "CWE-353, “Missing Support for Integrity Check,” occurs when a protocol "
            "or implementation omits cryptographic integrity mechanisms - such as "
            "authenticated encryption, HMACs, or digital signatures - preventing "
            "detection of data corruption or tampering in transit.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2022-2793",
                "Emerson Electric’s Proficy Machine Edition ≤ 9.00 used the SRTP "
                "protocol without any integrity verification, allowing "
                "unauthenticated data tampering.",
            ),
            CVEReference(
                "CVE-2024-47123",
                "goTenna Pro App employs AES-CTR encryption for short messages "
                "without an HMAC or authentication tag, leaving them malleable to "
                "attackers.",
            ),
            CVEReference(
                "CVE-2023-32475",
                "Dell BIOS lacked integrity checks on firmware data transfers, "
                "enabling physical attackers to bypass security mechanisms.",
            ),
        ),
        closing=(
            "Remediation: Adopt authenticated encryption or encrypt-then-MAC schemes, "
            "verify integrity tags before decryption, and use high-level libraries or "
            "protocols that include end-to-end integrity checks by default."
        ),
    ),
)

CWE_354 = CWEPage(
    cwe_id="CWE-354",
    title="Improper Validation of Integrity Check Value",
    best_practices=(
        "Use authenticated encryption or digital signatures to generate and verify "
        "integrity checks.",
        "Verify integrity check values (e.g., HMACs, checksum tags) before processing "
        "any data.",
        "Use constant-time comparison functions when validating integrity tags to "
        "prevent timing attacks.",
        "Employ high-level cryptographic libraries that handle integrity verification "
        "and key management for you.",
        "Fail securely: reject or log any data whose integrity value is missing, "
        "invalid, or expired.",
    ),
    bad_practices=(
        "Using insecure simple string equality (==) to compare HMACs or signatures.",
        "Decrypting or processing data before verifying its integrity tag, enabling "
        "padding oracles.",
        "Omitting checks for missing or truncated integrity values and proceeding "
        "anyway.",
        "Rolling custom CRC or checksum functions without cryptographic strength.",
        "Ignoring errors or exceptions thrown by integrity verification routines.",
    ),
    good_samples=(
        """// Good: Node.js using HMAC-SHA256 and constant-time compare
import { createHmac, timingSafeEqual } from 'crypto';

function verifyData(data: Buffer, signature: Buffer, key: Buffer): boolean {
  const hmac = createHmac('sha256', key);
  hmac.update(data);
  const expected = hmac.digest();
  // ensure same length
  if (expected.length !== signature.length) return false;
  return timingSafeEqual(expected, signature);
}""",
        """# Good: Python verifying AES-GCM tag before decryption
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.exceptions import InvalidTag

def decrypt(ciphertext: bytes, key: bytes, nonce: bytes, aad: bytes = None) -> bytes:
    aesgcm = AESGCM(key)
    try:
        # ciphertext includes tag at end
        return aesgcm.decrypt(nonce, ciphertext, aad)
    except InvalidTag:
        raise ValueError('Invalid integrity tag')""",
    ),
    bad_samples=(
        """// Bad: naive comparison of hex strings
import crypto from 'crypto';

function verify(data, sigHex, key) {
  const hmac = crypto.createHmac('sha256', key).update(data).digest('hex');
  // vulnerable to timing attacks and bypass
  return hmac === sigHex;
}""",
        """# Bad: decrypt then catch exceptions (padding oracle risk)
from Crypto.Cipher import AES

cipher = AES.new(key, AES.MODE_CBC, iv)
try:
    plaintext = cipher.decrypt(ciphertext)
    # attacker can infer padding vs tag errors from error messages
    return remove_padding(plaintext)
except Exception as e:
    return None""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-354",
        paragraphs=(
            "CWE-354, “Improper Validation of Integrity Check Value,” occurs when an "
            "application fails to properly verify checksums, HMACs, or authentication "
            "tags before trusting data - allowing attackers to inject or tamper with "
            "content without detection.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2024-47573",
                "An improper validation of integrity check value vulnerability in "
                "FortiNDR versions 7.4.2 and below, 7.2.1 and below, 7.1.1 and below, "
                "and 7.0.6 and below may allow an authenticated attacker with "
                "system‐maintenance privileges to install a corrupted firmware image.",
            ),
            CVEReference(
                "CVE-2024-47211",
                "In OpenStack Ironic before 21.4.4, 22.x and 23.x before 23.0.3, 24.x "
                "before 24.1.3, and 26.x before 26.1.0, there is a lack of checksum "
                "validation of supplied image_source URLs when converting images - "
                "permitting MITM modification of streamed images.",
            ),
        ),
        closing=(
            "Remediation: Always verify integrity tags prior to any processing: use "
            "authenticated encryption or encrypt‐then‐MAC, employ constant‐time "
            "comparisons, handle verification failures securely, and leverage vetted "
            "cryptographic libraries."
        ),
    ),
)

CWE_1239 = CWEPage(
    cwe_id="CWE-1239",
    title="Improper Zeroization of Hardware Register",
    best_practices=(
        "Ensure all registers storing sensitive data are explicitly zeroized when "
        "ownership or operating mode changes.",
        "Implement hardware zeroization commands (e.g., dedicated CLEAR or ZEROIZE "
        "registers) that clear internal state on demand.",
        "Use hardware-supported cryptographic modules compliant with zeroization "
        "requirements (e.g., FIPS-140-2 zeroization procedures).",
        "Include zeroization sequences in secure reset and deactivation procedures, "
        "and verify completion via status or fault registers.",
        "Design hardware state machines to force-zero critical registers on "
        "power-down or context-switch events.",
    ),
    bad_practices=(
        "Omitting zeroization commands - registers retain previous sensitive contents "
        "across mode changes.",
        "Relying solely on global reset without explicit zeroize support - some "
        "registers are unaffected.",
        "Not verifying completion of zeroization - hardware may not finish clearing "
        "before reuse.",
        "Embedding secret-loading logic without corresponding zeroize paths on error "
        "or timeout.",
        "Failing to include zeroization in power-down or low-power entry sequences, "
        "leaving remnant data.",
    ),
    good_samples=(
        """// Good: Verilog module with explicit zeroization on reset or command
module crypto_unit (
  input        clk,
  input        reset_n,
  input        zeroize,       // active-high zeroize command
  input  [127:0] data_in,
  output reg [127:0] key_reg
);
  always @(posedge clk or negedge reset_n) begin
    if (!reset_n) begin
      key_reg <= 128'b0;        // synchronous reset zeroization
    end else if (zeroize) begin
      key_reg <= 128'b0;        // explicit zeroization on command
    end else begin
      key_reg <= data_in;       // normal operation
    end
  end
endmodule""",
        """// Good: C driver issuing zeroize before mode switch
#include <stdint.h>
#define ZEROIZE_REG (*(volatile uint32_t*)0x40000010)

void switch_user_mode(void) {
    // clear sensitive registers before switching context
    ZEROIZE_REG = 0x1;            // trigger hardware zeroization
    while (!(ZEROIZE_REG & 0x2));// wait for complete status bit
    // now safe to change user context
}""",
    ),
    bad_samples=(
        """// Bad: no zeroization path - register retains old key
module crypto_unit (
  input         clk,
  input         reset_n,
  input  [127:0] data_in,
  output reg [127:0] key_reg
);
  always @(posedge clk or negedge reset_n) begin
    if (!reset_n) begin
      key_reg <= data_in;        // improper reset handling
    end else begin
      key_reg <= data_in;        // no zeroize support
    end
  end
endmodule""",
        """// Bad: driver never issues zeroize before context change
void switch_user_mode(void) {
    // directly switch context, old register data remains
    set_user_context(new_context);
}""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-1239",
        paragraphs=(
            "CWE-1239, “Improper Zeroization of Hardware Register,” occurs when a "
            "hardware component fails to clear sensitive information from internal "
            "registers when the operating mode or user context changes, potentially "
            "exposing secrets from a previous user.",
            "Demonstrative Example: A hardware cryptographic accelerator without a "
            "proper zeroize command retains intermediate key material in registers "
            "after a mode change, enabling data remanence attacks.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2023-20593",
                "An issue in “Zen 2” AMD CPUs under certain microarchitectural "
                "conditions may allow an attacker to access sensitive register "
                "contents that were not properly zeroized during context switches.",
            ),
        ),
        closing=(
            "Remediation: Always include explicit zeroization logic in hardware "
            "designs: define zeroize commands or signals, integrate them into reset "
            "and mode-switch sequences, verify completion via status bits, and adopt "
            "modules compliant with recognized zeroization standards (e.g., "
            "FIPS-140-2)."
        ),
    ),
)

CWE_759 = CWEPage(
    cwe_id="CWE-759",
    title="Use of a One-Way Hash without a Salt",
    best_practices=(
        "Generate a unique, high-entropy salt per password with a CSPRNG.",
        "Store the salt alongside the hash.",
        "Prefer adaptive, salted hash functions (bcrypt, scrypt, PBKDF2, Argon2).",
        "Use cost parameters high enough to slow down brute-force attacks.",
        "Raise hashing parameters over time and rehash on the next login.",
    ),
    bad_practices=(
        "Hashing passwords directly with MD5, SHA-1 or SHA-256 and no salt.",
        "Reusing one static salt for every password.",
        "Storing only the hash and dropping the salt.",
        "Generating salts with a weak RNG or too few bytes.",
        "Leaving unsalted legacy hashes in place.",
    ),
    good_samples=(
        """# Good: bcrypt, which salts automatically
def hash_password(password: str) -> bytes:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())""",
        """# Good: PBKDF2 with a random salt
def hash_password(password: str) -> str:
    salt = os.urandom(16)
    digest = hashlib.pbkdf2_hmac("sha512", password.encode(), salt, 600_000)
    return salt.hex() + ":" + digest.hex()""",
    ),
    bad_samples=(
        """# Bad: unsalted SHA-256
def hash_password(password: str) -> str:
    return hashlib.sha256(password.encode()).hexdigest()""",
        """# Bad: MD5 without a salt
def hash_password(password: str) -> str:
    return hashlib.md5(password.encode("utf-8")).hexdigest()""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-759",
        paragraphs=(
            "CWE-759 occurs when an application hashes sensitive inputs such as "
            "passwords without a unique salt, making precomputed attacks like "
            "rainbow tables feasible.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2024-8453",
                "Several network switch models stored admin passwords with an "
                "insecure, unsalted hash that could be cracked offline.",
            ),
            CVEReference(
                "CVE-2021-21253",
                "OnlineVotingSystem hashed user passwords without a salt until a "
                "patch added one.",
            ),
        ),
        closing=(
            "Use adaptive, salted hash libraries, store the salt with the hash and "
            "raise the cost parameters as hardware improves."
        ),
    ),
)

CWE_760 = CWEPage(
    cwe_id="CWE-760",
    title="Use of a One-Way Hash with a Predictable Salt",
    best_practices=(
        "Generate a cryptographically secure, per‐user salt using a CSPRNG (e.g., "
        "`crypto.randomBytes`, `SecureRandom`).",
        "Ensure each salt is unique and unpredictable, and store it alongside the "
        "hash (e.g., `\"salt:hash\"`).",
        "Use an adaptive, salted password‐hashing function (bcrypt, Argon2, PBKDF2, "
        "scrypt) which manages salts automatically.",
        "Incorporate the salt into the hash input (e.g., `hash(salt ∥ password)`) "
        "rather than using fixed or guessable values.",
        "Periodically increase cost parameters (iterations, memory) to keep ahead of "
        "evolving hardware capabilities.",
    ),
    bad_practices=(
        "Using a static, hard-coded salt (e.g., `\"mysalt\"`, application constant) "
        "for all users.",
        "Deriving the salt from predictable values (username, email, timestamp).",
        "Omitting the salt entirely and hashing only the password with a fast hash "
        "(MD5, SHA-1).",
        "Reusing the same salt across multiple passwords, enabling rainbow-table "
        "attacks.",
        "Rolling your own salt scheme with insufficient entropy or weak RNG.",
    ),
    good_samples=(
        """// Good: Node.js – PBKDF2 with a random, per-user salt
import { randomBytes, pbkdf2Sync } from 'crypto';

function hashPassword(password: string) {
  const salt = randomBytes(16).toString('hex');                    // 128-bit random salt
  const derived = pbkdf2Sync(password, salt, 100_000, 64, 'sha512')
    .toString('hex');
  return `${salt}:${derived}`;                                   // store "salt:hash"
}""",
        """# Good: Python – bcrypt (auto-generates a unique salt)
import bcrypt

def hash_password(password: str) -> bytes:
    # bcrypt.gensalt() creates a random salt with a default cost factor
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt())

def verify_password(password: str, stored: bytes) -> bool:
    return bcrypt.checkpw(password.encode('utf-8'), stored)""",
    ),
    bad_samples=(
        """// Bad: unsalted SHA-256 hash (no salt at all)
import { createHash } from 'crypto';

function hashPassword(password: string) {
  return createHash('sha256').update(password).digest('hex');
}""",
        """# Bad: predictable salt from username
import hashlib

def hash_password(username: str, password: str) -> str:
    salt = username  # attacker knows every username
    return hashlib.sha256((salt + password).encode()).hexdigest()""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-760",
        paragraphs=(
            "CWE-760, “Use of a One-Way Hash with a Predictable Salt,” occurs when a "
            "product applies a cryptographic hash (e.g., for passwords) but uses a "
            "salt value that is static or predictable - undermining the effectiveness "
            "of salting and enabling pre-computation attacks like rainbow tables.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2018-5552",
                "DocuTrac Office Therapy installer used a hard-coded salt "
                "“S@l+&pepper” in its.NET installer’s Crypt() routines, allowing "
                "attackers to pre-compute hashes and defeat password protection.",
            ),
            CVEReference(
                "CVE-2021-26113",
                "FortiWAN before 4.5.9 employed a predictable salt for password "
                "hashing, which permitted offline guessing of stored passwords by "
                "adversaries who obtained the password file.",
            ),
        ),
        closing=(
            "Remediation: Always use a unique, high-entropy salt per user generated "
            "by a CSPRNG, integrate it into a slow, adaptive hashing algorithm "
            "(bcrypt, Argon2, PBKDF2), and store only the salt and hash - never a "
            "predictable or constant salt value."
        ),
    ),
)

CWE_649 = CWEPage(
    cwe_id="CWE-649",
    title=(
        "Reliance on Obfuscation or Encryption of Security-Relevant Inputs without "
        "Integrity Checking"
    ),
    best_practices=(
        "Use authenticated-encryption (AEAD) modes that provide both confidentiality "
        "and integrity (e.g., AES-GCM, ChaCha20-Poly1305).",
        "If using separate primitives, follow Encrypt-then-MAC: first encrypt, then "
        "compute a strong HMAC (e.g., HMAC-SHA256) over the ciphertext.",
        "Always verify the authentication tag or MAC **before** decrypting or "
        "processing any data.",
        "Avoid relying on reversible “obfuscation” (Base64, ROT13, XOR) for "
        "protecting security-relevant inputs.",
        "Treat any encrypted or obfuscated data as untrusted until integrity checks "
        "have passed, and handle failures securely.",
    ),
    bad_practices=(
        "Relying on simple reversible “obfuscation” (Base64, ROT13, XOR) without any "
        "MAC.",
        "Using AES-CBC or AES-CTR without computing or verifying a separate MAC tag.",
        "Decrypting data before checking its integrity, opening padding-oracle or "
        "tampering attacks.",
        "Trusting encrypted cookies or tokens without validating an authentication "
        "tag.",
        "Ignoring errors thrown during decryption or MAC verification and proceeding "
        "anyway.",
    ),
    good_samples=(
        """// Good: Node.js AES-GCM authenticated encryption
import { randomBytes, createCipheriv, createDecipheriv } from 'crypto';

function encryptData(plaintext: string, key: Buffer): Buffer {
  const iv = randomBytes(12);
  const cipher = createCipheriv('aes-256-gcm', key, iv);
  const encrypted = Buffer.concat([
    cipher.update(plaintext, 'utf8'),
    cipher.final()
  ]);
  const tag = cipher.getAuthTag();
  // store iv | tag | ciphertext
  return Buffer.concat([iv, tag, encrypted]);
}

function decryptData(payload: Buffer, key: Buffer): string {
  const iv = payload.slice(0, 12);
  const tag = payload.slice(12, 28);
  const ciphertext = payload.slice(28);
  const decipher = createDecipheriv('aes-256-gcm', key, iv);
  decipher.setAuthTag(tag);
  const decrypted = Buffer.concat([
    decipher.update(ciphertext),
    decipher.final()
  ]);
  return decrypted.toString('utf8');
}""",
        """# Good: Python encrypt-then-MAC with HMAC-SHA256
from Crypto.Cipher import AES
import hmac, hashlib, os

def encrypt_then_mac(plaintext: bytes, key: bytes) -> bytes:
    iv = os.urandom(16)
    cipher = AES.new(key, AES.MODE_CBC, iv)
    ciphertext = iv + cipher.encrypt(pad(plaintext, AES.block_size))
    mac = hmac.new(key, ciphertext, hashlib.sha256).digest()
    # return mac | ciphertext
    return mac + ciphertext

def verify_then_decrypt(payload: bytes, key: bytes) -> bytes:
    mac, ciphertext = payload[:32], payload[32:]
    expected = hmac.new(key, ciphertext, hashlib.sha256).digest()
    if not hmac.compare_digest(mac, expected):
        raise ValueError('Integrity check failed')
    iv, ct = ciphertext[:16], ciphertext[16:]
    cipher = AES.new(key, AES.MODE_CBC, iv)
    return unpad(cipher.decrypt(ct), AES.block_size)""",
    ),
    bad_samples=(
        """// Bad: reversible Base64 “encryption”
function obfuscate(input: string): string {
  return Buffer.from(input, 'utf8').toString('base64');
}
function deobfuscate(data: string): string {
  return Buffer.from(data, 'base64').toString('utf8');
}""",
        """// Bad: AES-CBC without integrity
import { randomBytes, createCipheriv, createDecipheriv } from 'crypto';

function encryptCBC(plaintext: string, key: Buffer): Buffer {
  const iv = randomBytes(16);
  const cipher = createCipheriv('aes-256-cbc', key, iv);
  return Buffer.concat([
    iv,
    cipher.update(plaintext, 'utf8'),
    cipher.final()
  ]);
}

function decryptCBC(payload: Buffer, key: Buffer): string {
  const iv = payload.slice(0, 16);
  const ciphertext = payload.slice(16);
  const decipher = createDecipheriv('aes-256-cbc', key, iv);
  // no integrity check
  const decrypted = Buffer.concat([
    decipher.update(ciphertext),
    decipher.final()
  ]);
  return decrypted.toString('utf8');
}""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-649",
        paragraphs=(
            "CWE-649, “Reliance on Obfuscation or Encryption of Security-Relevant "
            "Inputs Without Integrity Checking,” occurs when an application assumes "
            "that just encrypting or obfuscating data is sufficient, but fails to "
            "verify integrity - allowing attackers to tamper with the ciphertext or "
            "obfuscated values undetected.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2018-18316",
                "A web application encrypted URL parameters without MAC, enabling an "
                "attacker to modify encrypted IDs to access unauthorized records.",
            ),
            CVEReference(
                "CVE-2020-25213",
                "An API relied on XOR-based obfuscation for tokens without integrity, "
                "allowing trivial tampering and replay of privilege escalation tokens.",
            ),
        ),
        closing=(
            "Remediation: Always pair encryption or obfuscation with a secure "
            "integrity check (MAC or AEAD), verify tags before use, and treat all "
            "encrypted inputs as untrusted until integrity is confirmed."
        ),
    ),
)

CWE_323 = CWEPage(
    cwe_id="CWE-323",
    title="Reusing a Nonce, Key Pair in Encryption",
    best_practices=(
        "Always use a fresh, unique nonce (IV) for every encryption operation with "
        "the same key.",
        "Generate nonces via a CSPRNG or a safely incrementing counter, never reuse a "
        "static or predictable value.",
        "Include the nonce alongside the ciphertext (e.g., prepend it) so the "
        "receiver can decrypt correctly.",
        "If you cannot guarantee unique nonces, use misuse-resistant AEAD modes "
        "(e.g., AES-GCM-SIV, ChaCha20-Poly1305-SIV).",
        "Audit and test your implementation against nonce-reuse attacks; enforce "
        "policies that prevent replay of old nonces.",
    ),
    bad_practices=(
        "Reusing a fixed or static nonce for every encryption (e.g., all-zero IV).",
        "Deriving the nonce from predictable values (timestamps with low granularity).",
        "Failing to include the nonce in the transmitted ciphertext, leading to "
        "accidental reuse.",
        "Using fast, stateless stream cipher modes (CTR, GCM) improperly without "
        "tracking nonces.",
        "Ignoring the specification requirement for unique nonces, allowing keystream "
        "reuse attacks.",
    ),
    good_samples=(
        """// Good: Node.js AES-GCM with a random, per-message nonce
import crypto from 'crypto';

function encrypt(data: string): Buffer {
  const key = crypto.randomBytes(32);
  const iv = crypto.randomBytes(12);                // unique nonce
  const cipher = crypto.createCipheriv('aes-256-gcm', key, iv);
  const ciphertext = Buffer.concat([cipher.update(data, 'utf8'), cipher.final()]);
  const tag = cipher.getAuthTag();
  return Buffer.concat([iv, tag, ciphertext]);     // include nonce+tag+ciphertext
}""",
        """# Good: Python AES-GCM with cryptography, random nonce
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
import os

def encrypt(data: bytes, key: bytes) -> bytes:
    aesgcm = AESGCM(key)
    nonce = os.urandom(12)                          # unique nonce
    ct = aesgcm.encrypt(nonce, data, None)
    return nonce + ct                               # prepend nonce""",
    ),
    bad_samples=(
        """// Bad: AES-GCM with static, reused IV
import crypto from 'crypto';

const key = crypto.randomBytes(32);
const iv = Buffer.alloc(12, 0);                    // static nonce
function encryptStatic(data) {
  const cipher = crypto.createCipheriv('aes-256-gcm', key, iv);
  const ct = Buffer.concat([cipher.update(data, 'utf8'), cipher.final()]);
  const tag = cipher.getAuthTag();
  return Buffer.concat([iv, tag, ct]);             // keystream reused every call
}""",
        """# Bad: Python AES-GCM reusing nonce each time
from Crypto.Cipher import AES
from Crypto.Random import get_random_bytes

key = get_random_bytes(32)
nonce = b'\\x00' * 12                              # reused nonce

def encrypt(data: bytes) -> bytes:
    cipher = AES.new(key, AES.MODE_GCM, nonce=nonce)
    ct, tag = cipher.encrypt_and_digest(data)
    return nonce + tag + ct                        # insecure: nonce reused""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-323",
        paragraphs=(
            "CWE-323, “Reusing a Nonce, Key Pair in Encryption,” occurs when an "
            "application encrypts multiple messages with the same key and nonce (IV), "
            "causing keystream reuse. In modes like AES-GCM or ChaCha20-Poly1305, "
            "nonce reuse completely breaks confidentiality and can allow an attacker "
            "to recover plaintexts or forge messages.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2024-23688",
                "Consensys Discovery ≤0.4.4’s AES handler reused nonces in GCM mode, "
                "allowing remote attackers to recover or forge authenticated data.",
            ),
            CVEReference(
                "CVE-2016-0270",
                "IBM Domino 9.0.1 Fix Packs used random-but-reused nonces in TLS "
                "AES-GCM, enabling a “forbidden attack” to spoof and decrypt traffic.",
            ),
        ),
        closing=(
            "Remediation: Guarantee unique nonces per encryption - use a CSPRNG or "
            "monotonically incrementing counter, include the nonce with the "
            "ciphertext, or adopt nonce-misuse resistant AEAD modes (e.g., "
            "AES-GCM-SIV). Audit implementations to prevent accidental reuse."
        ),
    ),
)

CWE_347 = CWEPage(
    cwe_id="CWE-347",
    title="Improper Verification of Cryptographic Signature",
    best_practices=(
        "Always verify digital signatures using a proven cryptographic library - do "
        "not implement signature checks manually.",
        "Use the appropriate algorithm and padding mode (e.g., RSA-SHA256 with PKCS#1 "
        "v1.5 or PSS, ECDSA with SHA-2).",
        "Check return values or catch and handle signature verification exceptions - "
        "treat any failure as tampering.",
        "Validate the full signing key chain or certificate, ensuring the public key "
        "is trusted before use.",
        "Perform verification in constant time where applicable to avoid side-channel "
        "leaks.",
    ),
    bad_practices=(
        "Skipping signature verification entirely or treating exceptions as non-fatal.",
        "Comparing signatures via string equality or fast memory comparison "
        "(non-constant time).",
        "Using predictable keys or accepting any signature format without checking "
        "algorithm.",
        "Trusting a signature header or envelope without processing or validating its "
        "contents.",
        "Not validating the signer’s certificate chain or using untrusted keys.",
    ),
    good_samples=(
        """// Good: Node.js verifying an RSA-SHA256 signature
import { createVerify } from 'crypto';

function verifySignature(data: Buffer, signature: Buffer, publicKey: string): boolean {
  const verifier = createVerify('SHA256');
  verifier.update(data);
  verifier.end();
  return verifier.verify(publicKey, signature);
}""",
        """# Good: Python cryptography verifying an ECDSA signature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, padding
from cryptography.exceptions import InvalidSignature

def verify_signature(public_key, signature: bytes, data: bytes) -> bool:
    try:
        public_key.verify(
            signature,
            data,
            ec.ECDSA(hashes.SHA256())
        )
        return True
    except InvalidSignature:
        return False""",
        """// Good: Java JAR signature verification via JarFile
import java.io.File;
import java.util.jar.JarFile;

public void checkJar(String path) throws Exception {
    try (JarFile jar = new JarFile(new File(path), true)) {
        jar.stream().forEach(entry -> {
            try {
                // Reading the entry forces signature verification
                jar.getInputStream(entry).readAllBytes();
            } catch (Exception e) {
                throw new RuntimeException("Invalid JAR signature", e);
            }
        });
    }
}""",
    ),
    bad_samples=(
        """// Bad: naive string compare of base64 signature
function isValid(data, signatureB64, expectedB64) {
  // attacker can forge a valid base64 string to match
  return signatureB64 === expectedB64;
}""",
        """# Bad: Python treating signature as hash
import hashlib

def verify(data: bytes, signature: bytes) -> bool:
    # incorrect: signature is not merely a hash of data
    return hashlib.sha256(data).digest() == signature""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-347",
        paragraphs=(
            "CWE-347, “Improper Verification of Cryptographic Signature,” occurs when "
            "a product does not verify - or incorrectly verifies - a digital "
            "signature, allowing attackers to inject or tamper with data undetected.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2025-29775",
                "Vulnerabilities in the xml-crypto library allowed attackers to "
                "modify signed XML messages without detection, bypassing "
                "authorization checks.",
            ),
            CVEReference(
                "CVE-2024-48948",
                "An issue in Node.js Elliptic’s ECDSA verify omitted key validation "
                "checks, leading to false positives and potential spoofing.",
            ),
            CVEReference(
                "CVE-2022-41666",
                "EcoStruxure Operator Terminal Expert failed to verify DLL signatures "
                "properly, permitting malicious code execution by local users.",
            ),
        ),
        closing=(
            "Remediation: Always use well-tested cryptographic APIs for signature "
            "verification, validate all return values or exception flows, and ensure "
            "the signing key or certificate chain is trusted before accepting data."
        ),
    ),
)

CWE_349 = CWEPage(
    cwe_id="CWE-349",
    title="Acceptance of Extraneous Untrusted Data With Trusted Data",
    best_practices=(
        "Validate untrusted input against a strict schema that forbids additional "
        "properties (e.g., JSON Schema with `additionalProperties: false`, Joi "
        "`.unknown(false)`).",
        "Separate processing of trusted and untrusted data - do not merge external "
        "input directly into trusted objects.",
        "Whitelist allowed fields explicitly when combining configuration or "
        "payloads, ignoring any extraneous properties.",
        "Use strong input-validation libraries (Joi, AJV, Pydantic) configured to "
        "reject unknown or unsafe data by default.",
        "Log and fail securely on detection of unexpected fields, alerting to "
        "possible injection or poisoning attempts.",
    ),
    bad_practices=(
        "Merging untrusted `req.query`, `req.body`, or other inputs directly into "
        "trusted objects without filtering.",
        "Using permissive validation (e.g., JSON Schema `additionalProperties: true`) "
        "that allows arbitrary fields.",
        "Relying on simple property checks and then spreading the whole object, "
        "unintentionally including extras.",
        "Treating untrusted payloads as trusted after initial parsing, without a "
        "second integrity check.",
        "Logging or acting on unvalidated fields, enabling attackers to sneak in "
        "malicious data.",
    ),
    good_samples=(
        """// Good: Express.js with Joi schema rejecting unknown properties
import Joi from 'joi';
import express from 'express';

const app = express();
app.use(express.json());

const userSchema = Joi.object({
  username: Joi.string().required(),
  email: Joi.string().email().required(),
}).unknown(false);  // forbids any extraneous fields

app.post('/users', (req, res) => {
  const { error, value } = userSchema.validate(req.body);
  if (error) return res.status(400).send(error.message);
  // only username & email are present
  createUser(value);
  res.sendStatus(201);
});""",
        """# Good: Python FastAPI with Pydantic model forbidding extra data
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Extra

class User(BaseModel):
    username: str
    email: str

    class Config:
        extra = Extra.forbid  # reject any additional fields

app = FastAPI()

@app.post("/users")
async def create_user(user: User):
    return {"username": user.username, "email": user.email}""",
    ),
    bad_samples=(
        """// Bad: blindly merging query params into configuration
import express from 'express';
const app = express();

app.get('/config', (req, res) => {
  const defaultConfig = { timeout: 5000, retries: 3 };
  // attacker can add ?isAdmin=true or other fields
  const config = { ...defaultConfig, ...req.query };
  initializeService(config);
  res.send(config);
});""",
        """# Bad: Python YAML loader trusting extraneous keys
import yaml

with open('trusted_config.yaml') as f:
    cfg = yaml.safe_load(f)  # attacker-supplied file can include extra keys
# blindly update application settings
app_settings.update(cfg)""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-349",
        paragraphs=(
            "CWE-349, “Acceptance of Extraneous Untrusted Data With Trusted Data,” "
            "occurs when a product, while processing trusted data, also accepts "
            "untrusted data bundled with it and treats it as if it were trusted. This "
            "can lead to bypassing protection mechanisms or corrupting application "
            "state when unexpected fields or values are injected.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2024-46982",
                "A vulnerability in the Next.js framework (versions ≥13.5.1 & <14.0.0 "
                "<14.2.10) allowed cache-poisoning by sending crafted HTTP requests "
                "that included extraneous query parameters, treating them as part of "
                "a trusted route configuration.",
            ),
            CVEReference(
                "CVE-2024-52555",
                "JetBrains WebStorm before 2024.3.0 executed arbitrary code in "
                "“Untrusted Project” mode by accepting extra untrusted "
                "type-definition data in an installer script, bypassing the intended "
                "trust boundary.",
            ),
        ),
        closing=(
            "Remediation: Enforce strict schema validation that forbids unknown "
            "fields, whitelist permitted properties when merging untrusted input, and "
            "segregate trusted data from any external sources. Log and reject any "
            "payloads containing unexpected data."
        ),
    ),
)

PAGES = (
    CWE_353,
    CWE_354,
    CWE_1239,
    CWE_759,
    CWE_760,
    CWE_649,
    CWE_323,
    CWE_347,
    CWE_349,
)

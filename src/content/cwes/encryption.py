"""CWE pages for encryption and transmission issues."""

from src.core.pages import CVEReference, CWEPage, Explanation

CWE_326 = CWEPage(
    cwe_id="CWE-326",
    title="Inadequate Encryption Strength",
    best_practices=(
        "Use strong, standardized algorithms such as AES-256 in GCM or "
        "ChaCha20-Poly1305 modes.",
        "Always prefer authenticated encryption (AEAD) to ensure both confidentiality "
        "and integrity.",
        "Enforce up-to-date cipher suites (TLS 1.2+), disabling legacy ciphers like "
        "DES, RC4, and 3DES.",
        "Rely on vetted cryptography libraries (e.g., cryptography.io) rather than "
        "rolling your own.",
    ),
    bad_practices=(
        "Never use obsolete ciphers like DES, RC4, or 3DES for new applications.",
        "Do not roll your own encryption algorithms or modes of operation.",
        "Avoid ECB mode - its deterministic nature leaks plaintext patterns.",
        "Never rely on MD5 or SHA-1 for encryption or as part of your cipher suite.",
    ),
    good_samples=(
        """# Good: AES-256-GCM with Python cryptography
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
import os

key = AESGCM.generate_key(bit_length=256)
aesgcm = AESGCM(key)
nonce = os.urandom(12)
plaintext = b"Secret message"
ciphertext = aesgcm.encrypt(nonce, plaintext, None)
# store (nonce, ciphertext) securely""",
        """# Good: ChaCha20-Poly1305 example
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305
import os

key = ChaCha20Poly1305.generate_key()
chacha = ChaCha20Poly1305(key)
nonce = os.urandom(12)
data = b"Another secret"
encrypted = chacha.encrypt(nonce, data, b"")
# store (nonce, encrypted) securely""",
    ),
    bad_samples=(
        """# Bad: DES in ECB mode (insecure)
from Crypto.Cipher import DES

key = b"8bytekey"
cipher = DES.new(key, DES.MODE_ECB)
padded = b"SecretMsg!" + b" " * 6
ct = cipher.encrypt(padded)
# patterns in plaintext are reflected in ciphertext""",
        """# Bad: RC4 usage (broken cipher)
from Crypto.Cipher import ARC4

cipher = ARC4.new(b"weakkey")
ct = cipher.encrypt(b"Sensitive data")
# RC4 biases leak keystream""",
        """# Bad: AES-128 without integrity (CBC mode only)
from Crypto.Cipher import AES
import os

key = os.urandom(16)
iv = os.urandom(16)
cipher = AES.new(key, AES.MODE_CBC, iv)
padded = b"Attack at dawn" + b" " * 3
ct = cipher.encrypt(padded)
# no authentication - ciphertext tampering undetected""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-326",
        paragraphs=(
            "CWE-326 (“Inadequate Encryption Strength”) covers the use of "
            "cryptographic algorithms whose security parameters are no longer "
            "sufficient to counter modern attacks. Attackers exploit weak ciphers or "
            "modes (like DES, RC4, or AES-CBC without authentication) to decrypt or "
            "tamper with data.",
            "Strong encryption - using adequate key lengths (256-bit for AES, 256-bit "
            "or higher for ChaCha20) and authenticated modes (GCM, Poly1305) - "
            "ensures that even sophisticated adversaries cannot break confidentiality "
            "or integrity within a realistic timeframe.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2014-3566",
                "POODLE: Attackers exploited fallback to SSL 3.0 (using weak block "
                "cipher techniques), forcing connections to use an insecure protocol.",
            ),
            CVEReference(
                "CVE-2016-2183",
                "SWEET32: Exploited 64-bit block ciphers (3DES, Blowfish) in TLS to "
                "recover plaintext from long-lived sessions.",
            ),
        ),
        closing=(
            "Always audit your cryptographic configuration, disable legacy ciphers, "
            "and adopt modern, secure defaults to protect sensitive data against "
            "evolving threats."
        ),
    ),
)

CWE_327 = CWEPage(
    cwe_id="CWE-327",
    title="Use of a Broken or Risky Cryptographic Algorithm",
    best_practices=(
        "Use well-vetted, modern algorithms such as AES-GCM, ChaCha20-Poly1305, or RSA-OAEP.",
        "Prefer authenticated encryption (AEAD) modes for confidentiality and integrity.",
        "Rely on secure hash functions like SHA-256 or SHA-384 for HMAC and signatures.",
        "Keep cryptographic libraries up to date to avoid weaknesses in old implementations.",
    ),
    bad_practices=(
        "Do not use broken ciphers like RC4, DES, or 3DES for any new system.",
        "Avoid MD5 or SHA-1 for hashing, HMAC, or digital signatures.",
        "Never roll your own algorithms or modes; use standard implementations.",
        "Do not use ECB mode for block ciphers; it leaks data patterns.",
    ),
    good_samples=(
        """# Good: AES-256-GCM (AEAD) with the cryptography package
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
import os

key = AESGCM.generate_key(bit_length=256)
aesgcm = AESGCM(key)
nonce = os.urandom(12)
ciphertext = aesgcm.encrypt(nonce, b"Secret data", None)
# store (nonce, ciphertext) securely""",
        """# Good: RSA-OAEP with SHA-256 padding
from cryptography.hazmat.primitives.asymmetric import rsa, padding
from cryptography.hazmat.primitives import hashes

private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
ciphertext = private_key.public_key().encrypt(
    b"Sensitive info",
    padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    ),
)""",
        """# Good: HMAC-SHA256 for message authentication
import hmac
import hashlib

tag = hmac.new(b"supersecretkey", b"Important message", digestmod=hashlib.sha256).hexdigest()
# verify with hmac.compare_digest(expected, tag)""",
    ),
    bad_samples=(
        """# Bad: RC4 stream cipher
from Crypto.Cipher import ARC4

cipher = ARC4.new(b"weakkey")
ct = cipher.encrypt(b"Attack at dawn")
# RC4 biases leak keystream""",
        """# Bad: DES in ECB mode
from Crypto.Cipher import DES

cipher = DES.new(b"8bytekey", DES.MODE_ECB)
ct = cipher.encrypt(b"HelloWorld" + b" " * 6)
# deterministic output leaks plaintext patterns""",
        """# Bad: MD5 for HMAC
import hmac
import hashlib

tag = hmac.new(b"key", b"message", digestmod=hashlib.md5).hexdigest()
# MD5 collisions weaken the tag""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-327",
        paragraphs=(
            "CWE-327 describes systems that rely on deprecated or insecure "
            "algorithms. Broken ciphers have known weaknesses that attackers exploit "
            "to recover plaintext, forge messages, or bypass integrity protections.",
            "RC4, DES, 3DES and MD5 are no longer considered secure. Modern practice "
            "is AES-GCM or ChaCha20-Poly1305 for symmetric encryption, RSA-OAEP or "
            "ECIES for asymmetric encryption, and SHA-2 or SHA-3 for hashing.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2013-2566",
                "TLS connections using RC4 leaked plaintext through keystream biases.",
            ),
            CVEReference(
                "CVE-2016-2183",
                "SWEET32: 64-bit block ciphers like 3DES allowed data recovery from "
                "long-lived TLS sessions.",
            ),
        ),
        closing=(
            "Audit cryptographic configuration, disable legacy ciphers and move to "
            "proven, modern algorithms."
        ),
    ),
)

CWE_328 = CWEPage(
    cwe_id="CWE-328",
    title="Use of a Weak Hash",
    best_practices=(
        "Use modern, secure hash functions like SHA-256 or SHA-3 for general hashing "
        "needs.",
        "When storing passwords, always combine hashing with a salt and a slow "
        "algorithm (bcrypt, Argon2).",
        "Employ HMAC (e.g., HMAC-SHA256) or digital signatures for integrity checks "
        "rather than bare hashes.",
        "Keep your crypto libraries up to date to avoid known weaknesses or attacks "
        "on older hash variants.",
    ),
    bad_practices=(
        "Never rely on MD5 or SHA-1 for security-sensitive hashing - they are "
        "collision-prone.",
        "Avoid using bare hashes for password storage or integrity without a salt or "
        "MAC.",
        "Do not roll your own hash constructions or use truncated digests for "
        "security.",
        "Refrain from using fast hashes (MD5/SHA-1) for anything that requires "
        "resistance to brute-force.",
    ),
    good_samples=(
        """# Good: SHA-256 for file integrity
import hashlib

with open('data.bin', 'rb') as f:
    digest = hashlib.sha256(f.read()).hexdigest()
print('SHA-256:', digest)""",
        """# Good: HMAC-SHA256 for message authentication
import hmac, hashlib

message = b'Important message'
key = b'supersecretkey'
tag = hmac.new(key, message, hashlib.sha256).hexdigest()
# Later, verify with hmac.compare_digest(expected, tag)""",
        """# Good: Argon2 for password hashing
from argon2 import PasswordHasher

ph = PasswordHasher(time_cost=3, memory_cost=64*1024, parallelism=2)
hash = ph.hash("SecurePa$$w0rd")
# store hash; no need to manage your own salt""",
    ),
    bad_samples=(
        """# Bad: MD5 for password storage
import hashlib

pwd = "password123"
digest = hashlib.md5(pwd.encode()).hexdigest()
store_to_db(username, digest)""",
        """# Bad: SHA-1 for file integrity (collision risk)
import hashlib

with open('data.bin', 'rb') as f:
    digest = hashlib.sha1(f.read()).hexdigest()
print('SHA-1:', digest)""",
        """# Bad: Unsalted SHA-256 for passwords
import hashlib

pwd = "password123"
digest = hashlib.sha256(pwd.encode()).hexdigest()
store_to_db(username, digest)""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-328",
        paragraphs=(
            "CWE-328 (“Use of Weak Hash”) covers scenarios where applications rely on "
            "cryptographic hash functions that no longer offer adequate security. "
            "Functions like MD5 and SHA-1 are vulnerable to collision attacks, "
            "enabling attackers to craft different inputs that produce the same "
            "digest.",
            "When a hash function is weak, an adversary can manipulate data "
            "undetected (integrity bypass) or generate malicious collisions. For "
            "passwords, fast hashes accelerate brute-force attacks if a salt or slow "
            "algorithm isn’t used.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2008-0395",
                "MD5 collisions exploited in X.509 certificates, allowing rogue "
                "certificates to be accepted by vulnerable clients.",
            ),
            CVEReference(
                "CVE-2017-8281",
                "SHA-1 collision attack demonstration weakened trust in SHA-1–signed "
                "commits and artifacts.",
            ),
        ),
        closing=(
            "Always choose secure, up-to-date hash functions (SHA-256 or SHA-3) with "
            "proper use of salts, HMAC, or authenticated modes to defend against "
            "collisions and preimage attacks."
        ),
    ),
)

CWE_325 = CWEPage(
    cwe_id="CWE-325",
    title="Missing Cryptographic Step",
    best_practices=(
        "Always finalize and verify authentication tags when using AEAD modes "
        "(AES-GCM, ChaCha20-Poly1305).",
        "Use high-level primitives (e.g. Fernet, AESGCM) that combine encryption and "
        "integrity checks.",
        "For HMAC, call `.finalize()` and `.verify()` to ensure the data hasn’t been "
        "tampered with.",
        "Never skip the “digest” or “verify” step after encryption or hashing "
        "operations.",
    ),
    bad_practices=(
        "Never ignore or discard authentication tags after encryption.",
        "Do not use encryption libraries without calling their finalize or verify "
        "methods.",
        "Avoid rolling your own integrity checks - use battle-tested AEAD or HMAC "
        "APIs.",
        "Do not assume data integrity is provided just by using encryption; always "
        "perform the integrity step.",
    ),
    good_samples=(
        """# Good: AES-GCM with explicit tag verification
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
import os

key = AESGCM.generate_key(bit_length=256)
aesgcm = AESGCM(key)
nonce = os.urandom(12)
plaintext = b"Top secret"
ciphertext = aesgcm.encrypt(nonce, plaintext, None)
# Store (nonce, ciphertext)

# On decryption:
aesgcm.decrypt(nonce, ciphertext, None)  # raises if tag invalid""",
        """# Good: HMAC with verify
from cryptography.hazmat.primitives import hashes, hmac

key = b'supersecretkey'
message = b"Important message"

h = hmac.HMAC(key, hashes.SHA256())
h.update(message)
tag = h.finalize()
# Store (message, tag)

# On receipt:
h2 = hmac.HMAC(key, hashes.SHA256())
h2.update(message)
h2.verify(tag)  # throws if tag doesn’t match""",
    ),
    bad_samples=(
        """# Bad: AES-GCM without verifying tag
from Crypto.Cipher import AES
import os

key = os.urandom(16)
cipher = AES.new(key, AES.MODE_GCM)
ct, tag = cipher.encrypt_and_digest(b"Secret data")
# Store ct only (dropping tag)

# On decrypt:
cipher2 = AES.new(key, AES.MODE_GCM, nonce=cipher.nonce)
pt = cipher2.decrypt(ct)
# no call to cipher2.verify(tag) - tampering goes undetected""",
        """# Bad: HMAC but never verify
import hmac, hashlib

key = b'key'
message = b"Hello"
tag = hmac.new(key, message, hashlib.sha256).digest()
# Store (message, tag)

# On receive:
# just recalc but do not verify:
_ = hmac.new(key, message, hashlib.sha256).digest()
# no compare/verify step - forged messages accepted""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-325",
        paragraphs=(
            "CWE-325 (“Missing Cryptographic Step”) refers to cases where an "
            "application uses cryptographic functions but omits a critical final step "
            "- such as verifying an authentication tag or finalizing a digest. "
            "Without this step, attackers can tamper with ciphertext or data without "
            "detection.",
            "For example, AES-GCM provides both encryption and integrity - but if you "
            "drop the tag or skip decrypt_and_verify, you lose the protection against "
            "modified ciphertext. Similarly, HMAC requires calling.verify(tag) to "
            "confirm that data wasn’t altered.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2017-0199",
                "Microsoft Office failed to verify digital signatures on embedded OLE "
                "objects, allowing malicious code to run without integrity checks.",
            ),
            CVEReference(
                "CVE-2015-1641",
                "Adobe Reader did not correctly finalize or verify PDF signatures in "
                "certain streams, enabling unsigned content to be treated as valid.",
            ),
        ),
        closing=(
            "Always use high-level crypto APIs that integrate both encryption and "
            "integrity, and never bypass their finalize or verify methods. This "
            "ensures data remains confidential and tamper-proof."
        ),
    ),
)

CWE_311 = CWEPage(
    cwe_id="CWE-311",
    title="Missing Encryption of Sensitive Data",
    best_practices=(
        "Always use HTTPS/TLS (e.g., “https://” endpoints) for any sensitive data "
        "transmission.",
        "Ensure your HTTP clients verify server certificates (`verify=True`) and pin "
        "certificates when possible.",
        "Configure servers to redirect HTTP → HTTPS and enforce HSTS to prevent "
        "downgrade attacks.",
        "Use modern TLS versions (TLS 1.2+) and disable insecure protocols (SSLv3, "
        "TLS 1.0/1.1).",
    ),
    bad_practices=(
        "Never send credentials or PII over unencrypted HTTP endpoints.",
        "Do not disable SSL verification (`verify=False`), which allows MITM attacks.",
        "Avoid supporting HTTP without redirecting to HTTPS - attackers can intercept "
        "data.",
        "Do not use outdated TLS versions or ciphers that expose you to known "
        "vulnerabilities.",
    ),
    good_samples=(
        """# Good: simple HTTPS GET with certificate validation
import requests

response = requests.get(
    "https://api.example.com/user/info",
    timeout=5
)
data = response.json()""",
        """# Good: session with enforced TLS and HSTS headers
import requests

session = requests.Session()
session.verify = True
session.headers.update({"Strict-Transport-Security": "max-age=31536000; includeSubDomains"})
resp = session.post("https://api.example.com/secure", json=payload)""",
        """# Good: using aiohttp with SSL context
import aiohttp
import ssl

ssl_ctx = ssl.create_default_context()
ssl_ctx.options |= ssl.OP_NO_TLSv1 | ssl.OP_NO_TLSv1_1

async with aiohttp.ClientSession(connector=aiohttp.TCPConnector(ssl=ssl_ctx)) as session:
    async with session.get("https://api.example.com/data") as resp:
        result = await resp.json()""",
    ),
    bad_samples=(
        """# Bad: plaintext HTTP, no encryption
import requests

response = requests.get("http://api.example.com/user/info")
# data can be intercepted in cleartext""",
        """# Bad: disabling certificate verification
import requests

response = requests.get(
    "https://api.example.com/secure",
    verify=False
)
# skips SSL checks - vulnerable to MITM""",
        """# Bad: using TLS 1.0 via custom SSL context
import requests, ssl

ctx = ssl.SSLContext(ssl.PROTOCOL_TLSv1)
resp = requests.get("https://legacy.example.com", verify=ctx)
# uses insecure protocol version""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-311",
        paragraphs=(
            "CWE-311 (“Missing Encryption of Sensitive Data”) refers to any situation "
            "where sensitive information - credentials, personal data, or API tokens "
            "- is transmitted in cleartext or without proper encryption. Attackers on "
            "the same network can intercept these communications, steal data, and "
            "hijack user sessions.",
            "Common causes include calling HTTP endpoints directly, disabling SSL "
            "verification, or running outdated TLS protocols. Even if data is "
            "protected at rest, missing transport encryption leaves it exposed in "
            "transit.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2018-14647",
                "vBulletin forum software exposed login credentials via unencrypted "
                "HTTP, allowing attackers to capture usernames and passwords.",
            ),
            CVEReference(
                "CVE-2019-11510",
                "Pulse Secure VPN had an unauthenticated file read vulnerability that "
                "exposed user credentials in cleartext configuration files, leading "
                "to account compromise.",
            ),
        ),
        closing=(
            "To close this gap, always enforce HTTPS/TLS, verify certificates, and "
            "disable non-secure protocols. Regularly scan your endpoints for HTTP "
            "exposures and configure automatic redirects to HTTPS with HSTS."
        ),
    ),
)

CWE_319 = CWEPage(
    cwe_id="CWE-319",
    title="Cleartext Transmission of Sensitive Information",
    best_practices=(
        "Always use TLS (HTTPS, WSS) for any endpoint that carries credentials or PII.",
        "Enforce certificate verification and consider pinning critical endpoints.",
        "Redirect all HTTP traffic to HTTPS and set HSTS headers (Strict-Transport-Security).",
        "Use modern TLS versions (1.2+) and disable insecure ciphers or protocols.",
    ),
    bad_practices=(
        "Never transmit passwords, tokens, or PII over plain HTTP.",
        "Do not disable SSL verification (verify=False) or accept all certificates.",
        "Avoid embedding credentials in query strings or unencrypted headers.",
        "Do not rely on a VPN or the network perimeter alone; encrypt end to end.",
    ),
    good_samples=(
        """# Good: requests with enforced TLS and redirects
response = requests.get(
    "https://api.example.com/secure-data",
    timeout=5,
    allow_redirects=True,
    verify=True,
)
data = response.json()""",
        """# Good: aiohttp POST over HTTPS with a session
async def send_secure(payload):
    async with aiohttp.ClientSession() as session:
        async with session.post(
            "https://api.example.com/submit",
            json=payload,
        ) as resp:
            return await resp.text()""",
    ),
    bad_samples=(
        """# Bad: plaintext HTTP, no encryption
response = requests.post(
    "http://api.example.com/login",
    json={"username": user, "password": pwd},
)
# credentials sent in cleartext""",
        """# Bad: disabling certificate checks
response = requests.get(
    "https://api.example.com/data",
    verify=False,
)
# skips TLS validation, open to MITM""",
        """# Bad: sending a token in the URL query
token = "secret-token"
resp = requests.get(f"https://api.example.com/info?token={token}")
# token ends up in logs and referer headers""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-319",
        paragraphs=(
            "CWE-319 occurs when applications send sensitive data such as passwords, "
            "tokens or personal details over unencrypted channels. Attackers on the "
            "same network or in a man-in-the-middle position can read this data in "
            "real time, leading to credential theft and session hijacking.",
            "A single endpoint that accepts HTTP or skips certificate checks is "
            "enough. End-to-end encryption, proper certificate validation and strict "
            "transport policies are required.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2018-14647",
                "vBulletin sent authentication cookies over HTTP, allowing session "
                "hijacking via network interception.",
            ),
            CVEReference(
                "CVE-2020-26138",
                "ownCloud endpoints that did not enforce HTTPS exposed CSRF tokens and "
                "sessions in transit.",
            ),
        ),
        closing=(
            "Audit all endpoints, enforce HTTPS everywhere, and watch for HTTP URLs or "
            "disabled TLS checks anywhere in the stack."
        ),
    ),
)

CWE_370 = CWEPage(
    cwe_id="CWE-370",
    title="Missing Check for Certificate Revocation After Initial Check",
    best_practices=(
        "Always perform fresh certificate revocation checks (OCSP/CRL) on each TLS "
        "connection.",
        "Use libraries that support OCSP stapling and automatic revocation validation.",
        "Enable strict validation flags (e.g., `SSL_CTX_set_verify` with `VERIFY_PEER "
        "| VERIFY_FAIL_IF_NO_PEER_CERT`).",
        "Configure your HTTP client to fail if revocation information is unavailable.",
    ),
    bad_practices=(
        "Do not skip revocation checks after the initial certificate validation.",
        "Never disable OCSP or CRL checking (`set_ocsp_check(False)` or missing "
        "`VERIFY_CRL_*`).",
        "Avoid relying solely on expiration checks - revoked certs can still appear "
        "valid by date.",
        "Do not hardcode trust in certificates without verifying revocation status.",
    ),
    good_samples=(
        """# Good: requests with OCSP revocation check (via urllib3 + certvalidator)
import requests
from certvalidator import CertificateValidator
from urllib3.contrib.pyopenssl import PyOpenSSLContext

# Create SSL context with revocation checking
ctx = PyOpenSSLContext()
ctx.set_ocsp_check(True)

response = requests.get(
    "https://api.secure.example.com/data",
    timeout=5,
    verify=ctx
)
data = response.json()""",
        """# Good: aiohttp with custom SSL context enabling CRL
import aiohttp
import ssl

ssl_ctx = ssl.create_default_context()
ssl_ctx.load_verify_locations(cafile="ca_bundle.pem")
ssl_ctx.verify_flags |= ssl.VERIFY_X509_STRICT
ssl_ctx.load_verify_locations(cafile="crl_list.pem")
ssl_ctx.verify_flags |= ssl.VERIFY_CRL_CHECK_LEAF

async with aiohttp.ClientSession(connector=aiohttp.TCPConnector(ssl=ssl_ctx)) as session:
    async with session.get("https://secure.api.example.com") as resp:
        result = await resp.text()""",
    ),
    bad_samples=(
        """# Bad: requests without revocation check
import requests

response = requests.get(
    "https://api.example.com/secure",
    timeout=5,
    verify=True  # only checks signature & expiration, not revocation
)
data = response.json()""",
        """# Bad: default SSL context with no CRL/OCSP
import aiohttp
import ssl

ssl_ctx = ssl.create_default_context()
# missing CRL or OCSP settings
async with aiohttp.ClientSession(connector=aiohttp.TCPConnector(ssl=ssl_ctx)) as session:
    async with session.get("https://legacy.example.com") as resp:
        print(await resp.text())""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-370",
        paragraphs=(
            "CWE-370 (“Missing Check for Certificate Revocation After Initial Check”) "
            "occurs when an application validates a certificate’s signature and "
            "expiration but fails to verify whether that certificate has been revoked "
            "by the issuing CA. A revoked certificate may still appear valid by date "
            "and signature but should not be trusted.",
            "Attackers can exploit this by using stolen or compromised certificates "
            "that have been revoked. Without revocation checking (OCSP or CRL), your "
            "client accepts revoked certs as valid, enabling man-in-the-middle or "
            "unauthorized server impersonation.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2020-1971",
                "A vulnerability in GitLab CE/EE where revoked certificates were not "
                "checked on HTTPS requests, allowing MITM attacks by using revoked "
                "certs.",
            ),
            CVEReference(
                "CVE-2018-5390",
                "OpenSSL’s lack of CRL checking by default led some applications to "
                "accept revoked certs when CRL lists were not explicitly loaded.",
            ),
        ),
        closing=(
            "To close this gap, always enable OCSP/CRL revocation checks on each "
            "connection, configure clients to fail if revocation information is "
            "missing, and use libraries with built-in support for stapling and "
            "certificate status validation."
        ),
    ),
)

CWE_523 = CWEPage(
    cwe_id="CWE-523",
    title="Unprotected Transport of Credentials",
    best_practices=(
        "Always transport credentials over encrypted channels (HTTPS, WSS, SSH).",
        "Use built-in libraries’ secure auth methods (e.g., `requests` with `auth=` "
        "over HTTPS).",
        "Avoid placing credentials in URLs or query parameters - use headers or "
        "request bodies.",
        "Prefer key-based or token-based auth (OAuth, JWT) instead of plaintext "
        "passwords.",
    ),
    bad_practices=(
        "Never send credentials over plain HTTP or other unencrypted protocols.",
        "Do not embed usernames or passwords in URLs or query strings.",
        "Avoid using unencrypted protocols like FTP or Telnet for sensitive "
        "operations.",
        "Do not disable certificate validation (e.g., `verify=False`).",
    ),
    good_samples=(
        """# Good: HTTP Basic Auth over HTTPS
import requests

response = requests.get(
    "https://api.example.com/secure-data",
    auth=("alice", "SuperSecret123"),
    timeout=5,
    verify=True
)
data = response.json()""",
        """# Good: SSH key-based authentication
import paramiko

ssh = paramiko.SSHClient()
ssh.set_missing_host_key_policy(paramiko.AutoAddPolicy())
ssh.connect(
    hostname="secure.example.com",
    username="alice",
    key_filename="/home/alice/.ssh/id_rsa"
)
stdin, stdout, stderr = ssh.exec_command("cat /etc/secret.conf")
print(stdout.read())""",
    ),
    bad_samples=(
        """# Bad: credentials in URL over HTTP
import requests

response = requests.get(
    "http://api.example.com/data?user=alice&pass=SuperSecret123"
)
# credentials exposed in request line and logs""",
        """# Bad: FTP with plaintext credentials
from ftplib import FTP

ftp = FTP("ftp.example.com")
ftp.login("alice", "SuperSecret123")
# both commands and credentials travel unencrypted""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-523",
        paragraphs=(
            "CWE-523 (“Unprotected Transport of Credentials”) occurs when "
            "applications send usernames, passwords, tokens or other sensitive "
            "authentication data over unencrypted or improperly secured channels. "
            "Attackers who can sniff network traffic can capture these credentials in "
            "cleartext and use them to hijack accounts, escalate privileges, or move "
            "laterally within a network.",
            "Common pitfalls include using HTTP, FTP, or Telnet for credential "
            "exchange; embedding credentials in URLs; or disabling SSL/TLS "
            "verification. Even a single unprotected endpoint can compromise your "
            "entire authentication system.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2025-43704",
                "Arctera/Veritas Data Insight ≤7.1.1 sent cleartext HTTP Basic Auth "
                "credentials to Dell Isilon OneFS servers when HTTP was used instead "
                "of HTTPS, allowing passive attackers to steal user credentials.",
            ),
            CVEReference(
                "CVE-2022-31204",
                "Certain building controllers (PLC) transmitted passwords and session "
                "tokens in plaintext over their proprietary protocol, enabling "
                "attackers on the local network to capture and replay credentials.",
            ),
        ),
        closing=(
            "To eliminate CWE-523 vulnerabilities, enforce end-to-end encryption for "
            "all authentication exchanges, validate certificates, and use secure "
            "transport libraries that refuse unencrypted connections by default."
        ),
    ),
)

CWE_549 = CWEPage(
    cwe_id="CWE-549",
    title="Missing Password Field Masking",
    best_practices=(
        "Use getpass.getpass() for CLI password prompts to mask user input.",
        "In web forms, set `<input type=\"password\">` so browsers automatically hide "
        "characters.",
        "For GUI apps, use libraries (e.g. Tkinter’s `show=\"*\"` parameter) to mask "
        "entry fields.",
        "Never log, print, or expose the password value in cleartext anywhere in the "
        "UI or logs.",
    ),
    bad_practices=(
        "Do not use the built-in input() function for passwords - it shows characters "
        "as typed.",
        "Never call print() or log functions on a password variable.",
        "Avoid HTML `<input type=\"text\">` for password fields, which displays "
        "cleartext.",
        "Do not store or redisplay the password value anywhere in your application UI "
        "or logs.",
    ),
    good_samples=(
        """# Good: CLI prompt with masking
import getpass

password = getpass.getpass("Enter your password: ")
# input is not shown on screen""",
        """# Good: masked input in prompt_toolkit
from prompt_toolkit import prompt

password = prompt("Enter password: ", is_password=True)
# characters appear as • or * on screen""",
    ),
    bad_samples=(
        """# Bad: plaintext input prompt
password = input("Enter your password: ")
# user sees characters as they type""",
        """# Bad: printing password to console
import getpass

pw = getpass.getpass("Password: ")
print("You entered:", pw)
# exposes password in cleartext""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-549",
        paragraphs=(
            "CWE-549 (“Missing Password Field Masking”) occurs when applications "
            "accept or display passwords in cleartext - whether during user entry or "
            "in subsequent UI components. When masking is omitted, onlookers or "
            "screen-recording tools can capture sensitive credentials.",
            "This weakness applies to command-line tools, desktop GUIs, and web forms "
            "alike. In CLI contexts, using Python’s built-in input() reveals each "
            "character; in web apps, using `<input type=\"text\"/>` fails to hide "
            "what the user types. Proper masking prevents shoulder- surfing and "
            "reduces exposure if the screen is shared or recorded.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2025-0148",
                "Zoom Jenkins Marketplace plugin (<1.6) failed to mask password "
                "fields in its UI, allowing an unauthenticated attacker to read admin "
                "secrets.",
            ),
            CVEReference(
                "CVE-2024-10122",
                "Topdata Inner Rep Plus WebServer 2.01 exposed operator passwords in "
                "cleartext entry forms, enabling remote credential harvesting.",
            ),
        ),
        closing=(
            "Always verify that every password entry point in your application - CLI, "
            "GUI, and web - uses proper masking or secure input routines. Review your "
            "forms, configuration panels, and logging to ensure no password ever "
            "appears in cleartext."
        ),
    ),
)

CWE_5 = CWEPage(
    cwe_id="CWE-5",
    title="J2EE Misconfiguration: Data Transmission Without Encryption",
    best_practices=(
        "Configure your web.xml to require SSL: use "
        "`<transport-guarantee>CONFIDENTIAL</transport-guarantee>` on sensitive URL "
        "patterns.",
        "Disable any HTTP connector in your server (e.g., Tomcat’s `<Connector "
        "port=\"8080\" protocol=\"HTTP/1.1\" ... />`).",
        "Enable only HTTPS connectors with proper keystore configuration and strong "
        "TLS settings.",
        "Use application-level checks (e.g., Spring Security’s "
        "`requires-channel=\"https\"`) to enforce HTTPS everywhere.",
    ),
    bad_practices=(
        "Do not leave an unencrypted HTTP connector enabled (e.g., port 8080).",
        "Never rely on network perimeter (firewall) instead of end-to-end encryption.",
        "Avoid hard-coding URLs as “http://” - always use “https://” in config and "
        "code.",
        "Do not skip SSL configuration or ignore certificate verification in your "
        "client code.",
    ),
    good_samples=(
        """<!-- Good: web.xml transport guarantee -->
<security-constraint>
  <web-resource-collection>
    <web-resource-name>Secure Area</web-resource-name>
    <url-pattern>/secure/*</url-pattern>
  </web-resource-collection>
  <user-data-constraint>
    <transport-guarantee>CONFIDENTIAL</transport-guarantee>
  </user-data-constraint>
</security-constraint>""",
        """// Good: Tomcat server.xml HTTPS connector only
<Connector
    port="8443" protocol="org.apache.coyote.http11.Http11NioProtocol"
    maxThreads="150" SSLEnabled="true">
  <SSLHostConfig>
    <Certificate
      certificateKeystoreFile="conf/keystore.jks"
      type="RSA" />
  </SSLHostConfig>
</Connector>

// removed any <Connector port="8080" ... />""",
    ),
    bad_samples=(
        """<!-- Bad: web.xml missing transport guarantee -->
<security-constraint>
  <web-resource-collection>
    <web-resource-name>Secure Area</web-resource-name>
    <url-pattern>/secure/*</url-pattern>
  </web-resource-collection>
  <!-- no user-data-constraint: leaves data in cleartext -->
</security-constraint>""",
        """// Bad: Tomcat with default HTTP connector still enabled
<Connector port="8080" protocol="HTTP/1.1" connectionTimeout="20000" redirectPort="8443"/>
<Connector port="8443" protocol="HTTP/1.1" SSLEnabled="true" ... />
# traffic to /secure/* still accessible via HTTP!""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-5",
        paragraphs=(
            "CWE-5 (“J2EE Misconfiguration: Data Transmission Without Encryption”) "
            "occurs when a Java EE application exposes sensitive endpoints (login, "
            "payment, personal data) over unencrypted HTTP. Even if you secure the "
            "perimeter, any HTTP entry point allows attackers to intercept or modify "
            "data in transit.",
            "Common mistakes include forgetting to set transport-guarantee in "
            "web.xml, leaving Tomcat’s default HTTP connector enabled, or hard-coding "
            "“http://” URLs in client code. These oversights open the door to "
            "credential theft, session hijacking, and data tampering attacks.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2013-4452",
                "IBM WebSphere Liberty Profile exposed its admin REST interface over "
                "HTTP by default, allowing credentials to be captured in cleartext.",
            ),
            CVEReference(
                "CVE-2016-5498",
                "JBoss EAP 6.x enabled its management console on port 9990 (HTTP) "
                "without SSL, leading to easy interception of admin credentials.",
            ),
        ),
        closing=(
            "To remediate, audit your web.xml and server.xml configurations to "
            "enforce HTTPS only, remove unsecured connectors, and review all code for "
            "“http://” references. Proper transport encryption is non-negotiable in "
            "any production system."
        ),
    ),
)

PAGES = (
    CWE_326,
    CWE_327,
    CWE_328,
    CWE_325,
    CWE_311,
    CWE_319,
    CWE_370,
    CWE_523,
    CWE_549,
    CWE_5,
)

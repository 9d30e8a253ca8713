"""CWE pages for key, credential and password management."""

from src.core.pages import CVEReference, CWEPage, Explanation

CWE_321 = CWEPage(
    cwe_id="CWE-321",
    title="Use of Hard-coded Cryptographic Key",
    best_practices=(
        "Never embed cryptographic keys or secrets directly in source code.",
        "Load keys at runtime from secure storage (environment variables, vaults).",
        "Use a secrets manager (HashiCorp Vault, AWS KMS, Azure Key Vault).",
        "Rotate keys regularly and revoke old ones to limit exposure.",
    ),
    bad_practices=(
        "Do not hardcode keys, passwords, or tokens in your code.",
        "Avoid committing configuration files with embedded secrets.",
        "Never share code containing sensitive keys, in public or private repositories.",
        "Do not fall back to predictable default keys when configuration is missing.",
    ),
    good_samples=(
        """# Good: load the key from an environment variable
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

key = os.environ.get("AES_KEY")
if not key:
    raise RuntimeError("Missing AES_KEY in environment")
aesgcm = AESGCM(bytes.fromhex(key))
nonce = os.urandom(12)
ciphertext = aesgcm.encrypt(nonce, b"Sensitive data", None)""",
        """# Good: retrieve the key from HashiCorp Vault
from cryptography.fernet import Fernet

client = hvac.Client(url="https://vault.example.com", token=os.environ["VAULT_TOKEN"])
secret = client.secrets.kv.v2.read_secret_version(path="app/crypto-key")
key = secret["data"]["data"]["fernet_key"].encode()
cipher = Fernet(key)
encrypted = cipher.encrypt(b"Top secret")""",
    ),
    bad_samples=(
        """# Bad: hardcoded Fernet key
from cryptography.fernet import Fernet

key = b"DuMbHaRdCoDeDKeY1234567890abcdef"
cipher = Fernet(key)
token = cipher.encrypt(b"Very secret")""",
        """# Bad: hardcoded AES key in a script
from Crypto.Cipher import AES

KEY = b"0123456789abcdef0123456789abcdef"
cipher = AES.new(KEY, AES.MODE_GCM, nonce=b"000000000000")
ct, tag = cipher.encrypt_and_digest(b"Important")""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-321",
        paragraphs=(
            "CWE-321 refers to embedding encryption keys directly in application "
            "source code or configuration. Anyone who obtains the code, through a "
            "leaked repository or a compromised server, can extract the key and "
            "decrypt data or impersonate the application.",
            "Private repositories are at risk too: insiders, clones and backups leak. "
            "Hard-coded keys cannot be rotated without a code change, so the exposure "
            "lasts as long as the release.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2019-13177",
                "A static encryption key shipped in source allowed attackers to decrypt "
                "the settings database.",
            ),
            CVEReference(
                "CVE-2020-5902",
                "F5 BIG-IP TMUI contained a hardcoded secret that was exploited for "
                "remote code execution.",
            ),
        ),
        closing=(
            "Remove hard-coded secrets, retrieve keys at runtime from a secrets "
            "manager, and rotate any key that has been exposed."
        ),
    ),
)

CWE_798 = CWEPage(
    cwe_id="CWE-798",
    title="Use of Hard-coded Credentials",
    best_practices=(
        "Never embed usernames, passwords, or API keys directly in source code.",
        "Load credentials at runtime from secure stores (environment variables, "
        "vaults).",
        "Use role-based access and short-lived tokens where possible.",
        "Automate secret rotation and revoke old credentials promptly.",
    ),
    bad_practices=(
        "Do not commit configuration files containing credentials to version control.",
        "Avoid hard-coding service account passwords or tokens in your application.",
        "Never include credentials in client-side code or public repositories.",
        "Do not fallback to default or placeholder credentials in production.",
    ),
    good_samples=(
        """# Good: load DB credentials from environment
import os
import psycopg2

db_user = os.getenv("DB_USER")
db_pass = os.getenv("DB_PASS")
conn = psycopg2.connect(
    host="db.example.com",
    user=db_user,
    password=db_pass
)""",
        """# Good: fetch API key from HashiCorp Vault
import hvac
import os
import requests

client = hvac.Client(
    url="https://vault.example.com",
    token=os.environ["VAULT_TOKEN"]
)
secret = client.secrets.kv.v2.read_secret_version(path="app/api-key")
api_key = secret["data"]["data"]["key"]
resp = requests.get("https://api.service.com/data", headers={"Authorization": f"Bearer {api_key}"})""",
    ),
    bad_samples=(
        """# Bad: hard-coded database credentials
conn = psycopg2.connect(
    host="db.example.com",
    user="admin",
    password="SuperSecret123"
)""",
        """# Bad: hard-coded API key in code
API_KEY = "ABCDEF1234567890"
response = requests.get(
    "https://api.service.com/data",
    headers={"Authorization": f"Bearer {API_KEY}"}
)""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-798",
        paragraphs=(
            "CWE-798 (“Use of Hard-coded Credentials”) refers to situations where "
            "applications embed secrets - like usernames, passwords, or API keys - "
            "directly in source code. Anyone with access to the codebase (even via a "
            "leaked repo or a decompiled binary) can extract and misuse these "
            "credentials, leading to unauthorized access.",
            "Hard-coded credentials cannot be rotated without a code change, "
            "increasing the window of exposure. They also often bypass secrets "
            "management policies and auditing.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2020-5902",
                "F5 BIG-IP TMUI included a hard-coded “bigiq” user credential, which "
                "attackers exploited to execute arbitrary commands on the appliance.",
            ),
            CVEReference(
                "CVE-2022-1471",
                "FortiOS SSL-VPN had a hidden hard-coded credential for a maintenance "
                "account, allowing remote attackers to gain administrative access.",
            ),
        ),
        closing=(
            "To remediate, remove all hard-coded secrets, adopt runtime retrieval of "
            "credentials from secure vaults, and implement automated rotation and "
            "auditing of all sensitive keys and passwords."
        ),
    ),
)

CWE_1392 = CWEPage(
    cwe_id="CWE-1392",
    title="Use of Default Credentials",
    best_practices=(
        "Force change of any default credentials on first startup or deploy.",
        "Remove or disable default accounts that are not explicitly configured.",
        "Require unique credentials per instance; never reuse factory defaults.",
        "Enforce strong password policies and rotate administrative credentials "
        "regularly.",
    ),
    bad_practices=(
        "Do not leave factory-default usernames/passwords in your code or config.",
        "Avoid relying on well-known default credentials like “admin/admin.”",
        "Never skip the step of reconfiguring default accounts during installation.",
        "Do not document default credentials in publicly accessible materials.",
    ),
    good_samples=(
        """# Good: enforce default password change on first login
def login(username, password):
    if user.is_using_default_credentials():
        raise AuthenticationError("Default credentials must be changed before use")
    authenticate_user(username, password)""",
        """# Good: load admin credentials from secure store
import os

admin_user = os.getenv("ADMIN_USER")
admin_pass = os.getenv("ADMIN_PASS")
if not admin_user or not admin_pass:
    raise RuntimeError("Admin credentials must be set in environment variables")
connect_admin(admin_user, admin_pass)""",
    ),
    bad_samples=(
        """# Bad: using hardcoded default admin credentials
def login(username, password):
    if username == "admin" and password == "admin":
        grant_admin_access()
    else:
        deny_access()""",
        """# Bad: default DB credentials in code
import pymysql

conn = pymysql.connect(
    host="db.internal",
    user="root",
    password="root",
    db="appdb"
)""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-1392",
        paragraphs=(
            "CWE-1392 (“Use of Default Credentials”) occurs when applications ship "
            "with factory-default accounts or passwords that remain unchanged in "
            "production. Attackers know these defaults and can immediately gain "
            "elevated access.",
            "Devices and software often include “admin/admin” or “root/password” by "
            "default. Failure to enforce credential changes or disable these accounts "
            "leaves systems wide open to unauthorized administrative control.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2017-17215",
                "D-Link routers using default “admin/admin” credentials were "
                "exploited by automated bots to gain remote control of home networks.",
            ),
            CVEReference(
                "CVE-2019-13024",
                "Huawei video conferencing systems retained default admin passwords, "
                "allowing unauthenticated attackers to access meeting controls.",
            ),
        ),
        closing=(
            "To remediate, require credential change at first use, remove unused "
            "default accounts, and audit for any leftover factory settings. Strong, "
            "unique credentials are essential to secure administrative interfaces."
        ),
    ),
)

CWE_1394 = CWEPage(
    cwe_id="CWE-1394",
    title="Use of Default Cryptographic Key",
    best_practices=(
        "Never ship with a built-in crypto key - generate or retrieve keys at "
        "deployment time.",
        "Load keys from secure vaults or environment variables, not from code or "
        "static files.",
        "Rotate cryptographic keys regularly and revoke old ones to limit impact of "
        "leaks.",
        "Use hardware security modules (HSMs) or managed key services to protect key "
        "material.",
    ),
    bad_practices=(
        "Do not include default or sample keys in code or configuration.",
        "Avoid using the same static key across all installations.",
        "Never fall back to a hard-coded key when environment configuration is "
        "missing.",
        "Do not expose key material in logs, documentation, or error messages.",
    ),
    good_samples=(
        """# Good: retrieve AES key from environment
import os
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

hex_key = os.getenv("APP_AES_KEY")
if not hex_key:
    raise RuntimeError("Missing APP_AES_KEY")
key = bytes.fromhex(hex_key)
aesgcm = AESGCM(key)
nonce = os.urandom(12)
ciphertext = aesgcm.encrypt(nonce, b"Sensitive", None)""",
        """# Good: fetch key from AWS KMS
import boto3
from base64 import b64decode
from cryptography.fernet import Fernet

kms = boto3.client("kms")
resp = kms.decrypt(CiphertextBlob=b64decode(os.environ["ENCRYPTED_FERNET_KEY"]))
key = resp["Plaintext"]
cipher = Fernet(key)
token = cipher.encrypt(b"Secret Data")""",
    ),
    bad_samples=(
        """# Bad: default AES key in code
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
import os

# sample key used in every install!
key = bytes.fromhex("00112233445566778899aabbccddeeff")
aesgcm = AESGCM(key)
nonce = os.urandom(12)
ct = aesgcm.encrypt(nonce, b"Data", None)""",
        """# Bad: hard-coded Fernet key
from cryptography.fernet import Fernet

# example key from docs, never rotate!
key = b"c2VjcmV0X2tleV9leGFtcGxlMTIzNDU2Nzg5MA=="
cipher = Fernet(key)
token = cipher.encrypt(b"Very secret")""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-1394",
        paragraphs=(
            "CWE-1394 (“Use of Default Cryptographic Key”) refers to applications "
            "shipping with built-in or sample keys that are the same across every "
            "installation. Attackers familiar with these defaults can decrypt data, "
            "forge tokens, or bypass authentication without needing to compromise "
            "your systems.",
            "Default keys cannot be rotated by users easily and often end up widely "
            "published in documentation or public code examples. Removing any static "
            "key and fetching real keys at runtime from secure stores is essential to "
            "maintain confidentiality.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2019-13177",
                "Ansible Tower’s hardcoded encryption key in source allowed attackers "
                "to decrypt credential data stored in the database.",
            ),
            CVEReference(
                "CVE-2020-5902",
                "F5 BIG-IP’s default “bigiq” key enabled remote code execution by "
                "extracting the known key from the appliance configuration.",
            ),
        ),
        closing=(
            "To remediate, eliminate all default keys, enforce runtime key "
            "provisioning from vaults or environment variables, and implement "
            "automated key rotation with proper auditing."
        ),
    ),
)

CWE_258 = CWEPage(
    cwe_id="CWE-258",
    title="Empty Password in Configuration File",
    best_practices=(
        "Never leave password fields empty in configuration files.",
        "Require that all configuration-driven credentials be provided at "
        "deploy/runtime.",
        "Validate config on startup and fail fast if any password is missing or empty.",
        "Use environment variables or secret stores instead of plaintext config files.",
    ),
    bad_practices=(
        "Do not leave password values blank or commented out in configs.",
        "Avoid defaulting to empty strings - treat missing or empty as a fatal error.",
        "Never rely on developers to “remember” to fill in passwords later.",
        "Do not store credentials only in code; configuration must fail if blank.",
    ),
    good_samples=(
        """# Good: load DB password from environment with validation
import os
import psycopg2

db_pass = os.getenv("DB_PASS")
if not db_pass:
    raise RuntimeError("DB_PASS must be set and non-empty")
conn = psycopg2.connect(
    host="db.example.com",
    user="appuser",
    password=db_pass
)""",
        """# Good: use config library with schema validation
from pydantic import BaseSettings, ValidationError

class Settings(BaseSettings):
    db_password: str

try:
    settings = Settings()
except ValidationError as e:
    print("Configuration error:", e)
    exit(1)

# safe to use settings.db_password here""",
    ),
    bad_samples=(
        """# Bad: empty password in config
# config.yaml
database:
  host: db.example.com
  user: appuser
  password: ""  # empty, allows connections without auth""",
        """# Bad: code silently accepts blank password
import yaml

cfg = yaml.safe_load(open("config.yaml"))
db_pass = cfg["database"]["password"]  # may be ""
conn = psycopg2.connect(
    host=cfg["database"]["host"],
    user=cfg["database"]["user"],
    password=db_pass  # empty password used without warning
)""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-258",
        paragraphs=(
            "CWE-258 (“Empty Password in Configuration File”) occurs when "
            "applications allow or ship configuration files with blank password "
            "fields. An empty string is often accepted as a valid credential, letting "
            "anyone or automated tools connect without authentication.",
            "Attackers scanning code repositories or servers can quickly identify and "
            "exploit any service configured with an empty password. Even if "
            "unintended during development, blank credentials in production remove "
            "all access controls for that component.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2019-19781",
                "Citrix ADC and Gateway appliances shipped with default configs that "
                "allowed authentication bypass via empty or missing parameters, "
                "enabling remote code execution.",
            ),
            CVEReference(
                "CVE-2021-44228",
                "Log4Shell exploits often targeted instances misconfigured to allow "
                "blank JNDI credentials, facilitating unauthenticated access.",
            ),
        ),
        closing=(
            "To remediate, enforce strict schema validation on configuration - fail "
            "fast on missing or empty passwords, use environment-based secrets "
            "injection, and audit all config files for blank credentials before "
            "deployment."
        ),
    ),
)

CWE_260 = CWEPage(
    cwe_id="CWE-260",
    title="Password in Configuration File",
    best_practices=(
        "Never store passwords in plaintext configuration files.",
        "Load credentials at runtime from environment variables or secret stores.",
        "Use configuration validation to fail if any password field is set in a file.",
        "Encrypt configuration files at rest and restrict filesystem permissions.",
    ),
    bad_practices=(
        "Do not commit config files containing passwords to version control.",
        "Avoid storing credentials in cleartext YAML, JSON, or INI files.",
        "Never ship a default or sample config with real passwords inside.",
        "Do not rely on application code to overwrite or ignore file-stored passwords "
        "at runtime.",
    ),
    good_samples=(
        """# Good: load DB password from environment with validation
import os
import psycopg2

db_pass = os.getenv("DB_PASS")
if not db_pass:
    raise RuntimeError("DB_PASS must be provided via environment")
conn = psycopg2.connect(
    host="db.example.com",
    user="appuser",
    password=db_pass
)""",
        """# Good: encrypted config file with decryption at runtime
from cryptography.fernet import Fernet
import json

key = os.getenv("CONFIG_DECRYPT_KEY")
cipher = Fernet(key)
with open("config.enc", "rb") as f:
    enc = f.read()
config = json.loads(cipher.decrypt(enc))
db_pass = config["database"]["password"]
# no plaintext password stored on disk""",
    ),
    bad_samples=(
        """# Bad: plaintext password in JSON config
# config.json
{
  "database": {
    "host": "db.example.com",
    "user": "appuser",
    "password": "P@ssw0rd123"
  }
}""",
        """# Bad: reading password directly from file
import json

cfg = json.load(open("config.json"))
db_pass = cfg["database"]["password"]  # plaintext on disk
conn = psycopg2.connect(
    host=cfg["database"]["host"],
    user=cfg["database"]["user"],
    password=db_pass
)""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-260",
        paragraphs=(
            "CWE-260 (“Password in Configuration File”) describes the practice of "
            "placing user or system passwords directly in application configuration "
            "files. These files are often committed to source control, packaged in "
            "releases, or left on servers in cleartext, making them easy targets for "
            "attackers.",
            "Exposed config files can be scanned and harvested automatically. Once an "
            "attacker obtains the password, they can access databases, services, or "
            "APIs without any additional steps. Even if the file is protected by "
            "filesystem permissions, insider threats or backup leaks can still reveal "
            "these credentials.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2021-44228",
                "Log4Shell related leaks: Some users inadvertently committed "
                "configuration files containing database passwords, leading to mass "
                "credential compromise during the Log4Shell response.",
            ),
            CVEReference(
                "CVE-2020-13692",
                "Oracle WebLogic exposed its config.xml with embedded cleartext "
                "passwords via an unauthenticated endpoint, allowing remote attackers "
                "to gain administrative access.",
            ),
        ),
        closing=(
            "To remediate, enforce that all passwords are supplied at runtime via "
            "secure channels, encrypt configuration files at rest, and implement "
            "startup validation to reject any file with embedded plaintext "
            "credentials."
        ),
    ),
)

CWE_324 = CWEPage(
    cwe_id="CWE-324",
    title="Use of Key Past its Expiration Date",
    best_practices=(
        "Embed an expiration timestamp with each key and refuse to use keys past that "
        "date.",
        "Store key metadata (creation date, expiration) in your key management system.",
        "Before decryption or signing, always check `if (now <= key.expiration) "
        "throws`.",
        "Automate key rotation: generate new keys before old ones expire, and remove "
        "expired keys.",
    ),
    bad_practices=(
        "Do not ignore expiration - using an expired key allows past breaches to "
        "reach forward.",
        "Avoid hard-coding keys without any metadata about lifetime.",
        "Never continue to accept tokens or ciphertext just because decryption "
        "“works.”",
        "Do not leave expired keys in your active keystore - prune them automatically.",
    ),
    good_samples=(
        """# Good: checking key expiration before use
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from datetime import datetime
import json, os

# load key metadata
meta = json.load(open("key_meta.json"))
key_bytes = bytes.fromhex(meta["key_hex"])
expiration = datetime.fromisoformat(meta["expires_at"])

if datetime.utcnow() > expiration:
    raise RuntimeError("Encryption key has expired - rotate keys immediately")

aesgcm = AESGCM(key_bytes)
nonce = os.urandom(12)
ciphertext = aesgcm.encrypt(nonce, b"Sensitive data", None)""",
        """# Good: JWT verification enforces exp claim
import jwt
from datetime import datetime, timezone

secret = os.environ["JWT_SECRET"]
token = "eyJhbGciOi..."

# this will raise if token is expired
payload = jwt.decode(token, secret, algorithms=["HS256"])
print("Token valid until", datetime.fromtimestamp(payload["exp"], timezone.utc))""",
    ),
    bad_samples=(
        """# Bad: silently using expired key
from cryptography.fernet import Fernet

# expired hardcoded key - no check
key = b'vX4Gz...=='
cipher = Fernet(key)
token = "gAAAAA..."
# returns plaintext even if key should be retired
plaintext = cipher.decrypt(token)""",
        """# Bad: accepting JWTs without checking exp
import jwt

secret = os.environ["JWT_SECRET"]
token = "eyJhbGc..."

# decode without verify_exp allows expired tokens
payload = jwt.decode(token, secret, algorithms=["HS256"], options={"verify_exp": False})
# attacker can replay old token indefinitely""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-324",
        paragraphs=(
            "CWE-324 (“Use of Key Past its Expiration Date”) refers to continued use "
            "of cryptographic keys beyond their intended lifetime. Even if a key has "
            "not been directly compromised, its prolonged use increases the risk that "
            "older, weaker key material becomes vulnerable to cryptanalysis or "
            "accidental exposure.",
            "When a key expires, it should be immediately retired: no decryption, "
            "signing, or token verification should proceed with that key. Automated "
            "rotation ensures new messages use fresh keys, and pruning expired keys "
            "keeps your keystore clean.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2021-3449",
                "OpenSSL servers that did not enforce re-keying on long-lived "
                "connections allowed session keys to remain in use beyond safe "
                "limits, increasing exposure to timing attacks.",
            ),
            CVEReference(
                "CVE-2020-0601",
                "CurveBall: Windows CryptoAPI’s failure to properly validate "
                "certificate parameters including expiration enabled malicious "
                "certificates to be accepted.",
            ),
        ),
        closing=(
            "Always embed expiration metadata with each key, check that `now <= "
            "expiration` before use, and automate key rollover to defend against both "
            "accidental and deliberate misuse of outdated keys."
        ),
    ),
)

CWE_322 = CWEPage(
    cwe_id="CWE-322",
    title="Key Exchange Without Entity Authentication",
    best_practices=(
        "Always authenticate the other party before or during key exchange (e.g., via "
        "certificates or pre-shared keys).",
        "Use TLS or SSH libraries that validate peer identities and host keys by "
        "default.",
        "Implement signature-based key exchange (e.g., ECDHE+RSA) rather than plain "
        "Diffie-Hellman.",
        "Verify host keys or certificate chains on every connection and refuse on "
        "mismatch.",
    ),
    bad_practices=(
        "Never perform a Diffie-Hellman exchange without verifying the peer’s "
        "identity.",
        "Do not skip SSL certificate checks (e.g., `verify=False`).",
        "Avoid disabling host key verification in SSH (`AutoAddPolicy` without "
        "validation).",
        "Do not implement your own key exchange without robust authentication steps.",
    ),
    good_samples=(
        """# Good: TLS client with certificate validation via requests
import requests

response = requests.get(
    "https://secure.example.com/data",
    timeout=5,
    verify="/path/to/ca-bundle.crt"  # ensures server certificate is validated
)
data = response.json()""",
        """# Good: Paramiko SSH with explicit host key verification
import paramiko

ssh = paramiko.SSHClient()
ssh.load_system_host_keys()
ssh.set_missing_host_key_policy(paramiko.RejectPolicy())
ssh.connect(
    hostname="ssh.example.com",
    username="alice",
    key_filename="/home/alice/.ssh/id_rsa"
)
stdin, stdout, stderr = ssh.exec_command("uname -a")""",
    ),
    bad_samples=(
        """# Bad: plain DH without authentication
from Crypto.PublicKey import DSA
from Crypto.Random import random

# naive Diffie-Hellman: no signature or certificate
p = 0xFFFFFFFFFFFFFFFFC90FDAA2...
g = 2
a = random.getrandbits(256)
A = pow(g, a, p)
# send A to peer, receive B, compute shared secret
# attacker can intercept and substitute B without detection""",
        """# Bad: Paramiko SSH accepting any host key
import paramiko

ssh = paramiko.SSHClient()
ssh.set_missing_host_key_policy(paramiko.AutoAddPolicy())  # accepts unknown keys
ssh.connect("ssh.example.com", username="alice", password="password123")""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-322",
        paragraphs=(
            "CWE-322 (“Key Exchange Without Entity Authentication”) describes "
            "protocols where two parties derive a shared secret (e.g., "
            "Diffie–Hellman) without properly verifying each other’s identity. An "
            "attacker can perform a man-in-the-middle attack by substituting their "
            "own parameters, then decrypting or tampering with traffic undetected.",
            "Secure key exchange combines confidentiality (the secret) with "
            "authentication (certificates, signatures, or host key verification). TLS "
            "uses X.509 certificates, and SSH uses host keys - both ensure you’re "
            "talking to the intended peer, not an impostor.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2015-4000",
                "Logjam: Exploited downgrade attacks on Diffie–Hellman parameters by "
                "stripping stronger groups; servers without proper certificate "
                "pinning accepted the weaker handshake.",
            ),
            CVEReference(
                "CVE-2016-6304",
                "Jenkins SSH Plugin used AutoAddPolicy without verifying host keys, "
                "allowing malicious SSH servers to perform MitM attacks and steal "
                "credentials.",
            ),
        ),
        closing=(
            "To mitigate CWE-322, always use authenticated key exchange primitives "
            "(ECDHE+RSA/ECDSA), enforce certificate and host key validation, and "
            "disable any options that skip peer authentication."
        ),
    ),
)

CWE_329 = CWEPage(
    cwe_id="CWE-329",
    title="Generation of Predictable IV with CBC Mode",
    best_practices=(
        "Generate a fresh, cryptographically secure random IV for every encryption "
        "operation (e.g., `os.urandom(16)`).",
        "Never reuse or derive the IV from predictable values (timestamps, counters, "
        "static strings).",
        "Use high-level AEAD primitives (AES-GCM, ChaCha20-Poly1305) where IV/nonce "
        "management is built in.",
        "If you must use CBC mode, prepend the random IV in cleartext and validate it "
        "on decryption.",
    ),
    bad_practices=(
        "Do not use a constant or hard-coded IV (e.g., all-zero bytes or static "
        "string).",
        "Never derive the IV from the plaintext length, timestamp, or other "
        "predictable data.",
        "Avoid reusing the same IV with different keys or messages - this leaks "
        "patterns.",
        "Do not treat the IV as a secret - only the key is secret, but it must be "
        "unpredictable.",
    ),
    good_samples=(
        """# Good: AES-CBC with random IV each time
from Crypto.Cipher import AES
import os

key = os.urandom(32)              # 256-bit key
iv = os.urandom(16)               # fresh IV per message
cipher = AES.new(key, AES.MODE_CBC, iv)
padded = pad(b"Secret data", AES.block_size)
ct = iv + cipher.encrypt(padded)  # send IV ∥ ciphertext""",
        """# Good: using AEAD avoids manual IV handling
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
import os

key = AESGCM.generate_key(bit_length=256)
aesgcm = AESGCM(key)
nonce = os.urandom(12)
ct = aesgcm.encrypt(nonce, b"Sensitive", None)  # nonce is managed automatically""",
    ),
    bad_samples=(
        """# Bad: static zero IV
from Crypto.Cipher import AES
import os

key = os.urandom(32)
iv = b"\\x00" * 16          # static zero IV - reused each time
cipher = AES.new(key, AES.MODE_CBC, iv)
ct = cipher.encrypt(pad(b"Hello", 16))""",
        """# Bad: timestamp-derived IV
from Crypto.Cipher import AES
import time, os

key = os.urandom(32)
iv = int(time.time()).to_bytes(16, 'big')  # predictable
cipher = AES.new(key, AES.MODE_CBC, iv)
ct = iv + cipher.encrypt(pad(b"Data", 16))""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-329",
        paragraphs=(
            "CWE-329 (“Generation of Predictable IV with CBC Mode”) arises when an "
            "initialization vector (IV) used in CBC encryption is not random or is "
            "reused. Predictable IVs allow attackers to observe patterns across "
            "ciphertexts, facilitating plaintext recovery or enabling "
            "chosen-ciphertext attacks.",
            "In CBC mode, the IV must be unpredictable for each encryption. It is "
            "safe to transmit the IV in cleartext alongside the ciphertext, but it "
            "must be generated using a cryptographically secure random source (e.g., "
            "`os.urandom`).",
        ),
        cve_references=(
            CVEReference(
                "CVE-2016-2183",
                "SWEET32: While primarily about 64-bit block ciphers, it highlighted "
                "risks of block-cipher modes when IVs repeat over long sessions - "
                "reused IVs enabled plaintext recovery attacks.",
            ),
            CVEReference(
                "CVE-2018-5383",
                "A vulnerability in certain VPN implementations where static IVs were "
                "used for AES-CBC, allowing attackers to decrypt parts of the VPN "
                "stream.",
            ),
        ),
        closing=(
            "To remediate CWE-329, switch to AEAD modes (AES-GCM) or ensure your CBC "
            "implementation always uses a fresh, random IV. Never derive IVs from "
            "timestamps or reuse them across messages."
        ),
    ),
)

CWE_522 = CWEPage(
    cwe_id="CWE-522",
    title="Insufficiently Protected Credentials",
    best_practices=(
        "Store credentials in a dedicated secrets manager or OS keyring (never in "
        "code or plain files).",
        "Encrypt any stored credentials at rest and require decryption only at "
        "runtime.",
        "Use least-privilege service accounts and rotate credentials frequently.",
        "Fetch secrets at startup or on demand; do not expose them in environment "
        "dumps or logs.",
    ),
    bad_practices=(
        "Never commit plaintext credentials or API keys to source control.",
        "Do not store secrets in unencrypted environment variables or config files.",
        "Avoid printing or logging credentials anywhere in your application.",
        "Do not fallback to insecure defaults when secret retrieval fails.",
    ),
    good_samples=(
        """# Good: using keyring for credential storage
import keyring

# store: keyring.set_password("myapp", "db_user", "StrongP@ssw0rd")
password = keyring.get_password("myapp", "db_user")
connect_to_db(user="db_user", password=password)""",
        """# Good: decrypting credentials from AWS KMS
import os
import boto3
from base64 import b64decode

kms = boto3.client("kms")
ciphertext = b64decode(os.environ["ENCRYPTED_DB_PASS"])
resp = kms.decrypt(CiphertextBlob=ciphertext)
db_pass = resp["Plaintext"].decode()
connect_to_db(user="db_user", password=db_pass)""",
    ),
    bad_samples=(
        """# Bad: plaintext password in config file
# config.yaml
database:
  user: db_user
  password: "WeakPass123\"""",
        """# Bad: logging credentials for debugging
import logging

db_pass = "P@ssw0rd123"
logging.debug(f"Connecting to DB with password: {db_pass}")""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-522",
        paragraphs=(
            "CWE-522 (“Insufficiently Protected Credentials”) refers to situations "
            "where applications store, transmit, or log credentials without adequate "
            "protection. Attackers gaining access to these credentials can escalate "
            "privileges, move laterally, or exfiltrate data.",
            "Even if credentials are encrypted at rest, exposing them in logs or "
            "environment dumps undermines all encryption efforts. Proper secrets "
            "management ensures credentials are only accessible in memory when needed.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2018-5706",
                "An IoT device stored AWS access keys in plaintext config, allowing "
                "attackers to hijack cloud resources.",
            ),
            CVEReference(
                "CVE-2020-26738",
                "A CI/CD platform exposed service account tokens in build logs, "
                "enabling unauthorized repository access.",
            ),
        ),
        closing=(
            "To remediate CWE-522, adopt a robust secrets management strategy: "
            "encrypt credentials at rest, restrict access, avoid logging sensitive "
            "values, and rotate secrets regularly."
        ),
    ),
)

CWE_256 = CWEPage(
    cwe_id="CWE-256",
    title="Plaintext Storage of a Password",
    best_practices=(
        "Always store only a salted hash of the password, never the plaintext.",
        "Use a slow, memory-hard hashing algorithm such as bcrypt or Argon2.",
        "Apply a unique salt per user to defeat rainbow-table attacks.",
        "Implement rate limiting and account lockout after repeated failed login "
        "attempts.",
    ),
    bad_practices=(
        "Never log or display plaintext passwords in logs, error messages, or UIs.",
        "Do not send passwords in URLs, query parameters, or over unencrypted "
        "channels.",
        "Avoid using reversible encryption for password storage - always hash "
        "passwords.",
    ),
    good_samples=(
        """# Good: bcrypt with unique salt
import bcrypt

password = b"SuperSecret123"
salt = bcrypt.gensalt()
hashed = bcrypt.hashpw(password, salt)
store_to_db(username, hashed)""",
        """# Good: Argon2id for password hashing
from argon2 import PasswordHasher

ph = PasswordHasher(time_cost=3, memory_cost=64*1024, parallelism=2)
hash = ph.hash("SuperSecret123")
store_to_db(username, hash)""",
    ),
    bad_samples=(
        """# Bad: Storing plaintext password
user = {
    "username": "alice",
    "password": "SuperSecret123"
}
db.insert(user)""",
        """# Bad: Using a fast, insecure hash (MD5)
import hashlib

hashed = hashlib.md5("SuperSecret123".encode()).hexdigest()
store_to_db(username, hashed)""",
        """# Bad: Reversible encryption with hard-coded key
from cryptography.fernet import Fernet

key = b"hardcoded_insecure_key_1234"
cipher = Fernet(key)
encrypted = cipher.encrypt(b"SuperSecret123")
store_to_db(username, encrypted)""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-256",
        paragraphs=(
            "CWE-256 (“Plaintext Storage of a Password”) refers to keeping user "
            "passwords in cleartext - whether in a database, config file, or memory. "
            "Any breach of that storage instantly exposes valid passwords, enabling "
            "attackers to hijack accounts and escalate privileges.",
            "By using strong, salted hashing algorithms (like bcrypt or Argon2), you "
            "force attackers to spend significant compute time and memory to crack "
            "each password, drastically reducing the risk of mass credential "
            "compromise.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2017-16544",
                "Cisco Firepower Management Center stored admin passwords in "
                "plaintext backups, allowing attackers to recover credentials and "
                "seize control.",
            ),
            CVEReference(
                "CVE-2018-5730",
                "Aruba ClearPass exposed RADIUS secrets and user passwords in "
                "cleartext config files, enabling straightforward credential theft.",
            ),
        ),
        closing=(
            "Regularly audit your storage, enforce hashed passwords with unique "
            "salts, and implement strong authentication policies to eliminate this "
            "critical vulnerability."
        ),
    ),
)

CWE_257 = CWEPage(
    cwe_id="CWE-257",
    title="Storing Passwords in a Recoverable Format",
    best_practices=(
        "Use one-way hashing (bcrypt, Argon2) instead of reversible encryption.",
        "Never store encryption keys alongside the encrypted passwords.",
        "Apply a unique salt per user to ensure every hash is distinct.",
        "Enforce strong password policies and rotate keys regularly.",
    ),
    bad_practices=(
        "Do not use reversible encryption for password storage.",
        "Never hard-code or expose the encryption key in application code.",
        "Avoid storing passwords in a format you can decrypt programmatically.",
    ),
    good_samples=(
        """# Good: bcrypt (one-way) hashing
import bcrypt

password = b"UltraSecret!"
salt = bcrypt.gensalt()
hashed = bcrypt.hashpw(password, salt)
store_to_db(username, hashed)""",
        """# Good: Argon2id hashing (no recovery)
from argon2 import PasswordHasher

ph = PasswordHasher(time_cost=3, memory_cost=64*1024, parallelism=2)
hash = ph.hash("UltraSecret!")
store_to_db(username, hash)""",
    ),
    bad_samples=(
        """# Bad: Fernet reversible encryption with hard-coded key
from cryptography.fernet import Fernet

key = b"hardcoded_insecure_key_1234"
cipher = Fernet(key)
encrypted = cipher.encrypt(b"UltraSecret!")
store_to_db(username, encrypted)""",
        """# Bad: Custom symmetric AES encrypt/decrypt
from Crypto.Cipher import AES

key = b"thisisasecretkey"
cipher = AES.new(key, AES.MODE_ECB)
encrypted = cipher.encrypt(pad("UltraSecret!", 16))
# decrypt(encrypted) returns original password""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-257",
        paragraphs=(
            "CWE-257 (“Storing Passwords in a Recoverable Format”) describes storing "
            "user credentials using reversible encryption or encoding schemes. An "
            "attacker who gains access to the encryption key or decryption routine "
            "can recover every password in cleartext.",
            "Unlike one-way hashing, recoverable storage puts you at risk of mass "
            "credential theft whenever your key or code is compromised.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2018-1000861",
                "Jenkins stored credentials in XML configs using Fernet encryption "
                "with a bundled key, allowing attackers to decrypt passwords at will.",
            ),
            CVEReference(
                "CVE-2020-26138",
                "ownCloud kept user passwords in database fields encrypted with a "
                "reversible algorithm and static key, enabling easy recovery.",
            ),
        ),
        closing=(
            "Always choose one-way hashing for password storage. If reversible "
            "encryption is ever necessary (e.g., API tokens), ensure keys are stored "
            "securely, rotated frequently, and never co-located with application "
            "logic."
        ),
    ),
)

CWE_261 = CWEPage(
    cwe_id="CWE-261",
    title="Weak Encoding for Password",
    best_practices=(
        "Always use a one-way, salted hash (bcrypt, Argon2) rather than any "
        "reversible encoding.",
        "Never store passwords in Base64, hex, URL-encode, ROT13 or any encoding "
        "scheme.",
        "Use well-tested libraries for password hashing and verification.",
        "Enforce unique salts per password to protect against precomputed "
        "rainbow-table attacks.",
    ),
    bad_practices=(
        "Do not use Base64 or hex encoding as a way to “protect” passwords.",
        "Never rely on reversible transforms (ROT13, URL encoding) for secret storage.",
        "Avoid “rolling your own” encoding schemes instead of proven hashing "
        "functions.",
        "Do not omit a salt or use the same salt for every password.",
    ),
    good_samples=(
        """# Good: bcrypt with unique salt
import bcrypt

password = b"UltraSecure!"
salt = bcrypt.gensalt()
hashed = bcrypt.hashpw(password, salt)
store_to_db(username, hashed)
# To verify:
bcrypt.checkpw(password, hashed)""",
        """# Good: Argon2id hashing
from argon2 import PasswordHasher

ph = PasswordHasher(time_cost=4, memory_cost=1024*64, parallelism=4)
hash = ph.hash("UltraSecure!")
store_to_db(username, hash)
# To verify:
ph.verify(hash, "UltraSecure!")""",
    ),
    bad_samples=(
        """# Bad: Base64 “encoding” of password
import base64

pwd = "UltraSecure!"
encoded = base64.b64encode(pwd.encode()).decode()
store_to_db(username, encoded)
# easily reversed by base64.b64decode(encoded)""",
        """# Bad: hex encoding
pwd = "UltraSecure!"
hexed = pwd.encode().hex()
# hexed can be inverted: bytes.fromhex(hexed).decode()""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-261",
        paragraphs=(
            "CWE-261 (“Weak Encoding for Password”) occurs when applications use "
            "reversible encodings (Base64, hex, URL encoding, ROT13, etc.) to store "
            "or transmit passwords. Encoding is not encryption or hashing - anyone "
            "can decode it back to the original password in a single step.",
            "Attackers scanning databases or config files for Base64 or hex strings "
            "can programmatically decode them and obtain cleartext credentials. "
            "Proper password storage always relies on one-way hashing functions that "
            "are computationally expensive to invert.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2018-1000861",
                "Jenkins Credential Plugin stored secrets in XML using reversible "
                "Base64 encoding with a hard-coded key, allowing attackers to decode "
                "plaintext passwords easily.",
            ),
            CVEReference(
                "CVE-2020-26138",
                "ownCloud Policy Manager kept admin passwords in configuration files "
                "using predictable, reversible encoding, leading to mass credential "
                "compromise.",
            ),
        ),
        closing=(
            "To remediate CWE-261, eliminate any reversible encoding for passwords, "
            "adopt salted, slow hashing algorithms (bcrypt, Argon2), and enforce "
            "strict code reviews to prevent “quick and dirty” encoding hacks."
        ),
    ),
)

CWE_555 = CWEPage(
    cwe_id="CWE-555",
    title="J2EE Misconfiguration: Plaintext Password in Configuration File",
    best_practices=(
        "Do not store database or service passwords in plaintext in any configuration "
        "file.",
        "Externalize all secrets to a secure vault or environment variables and "
        "inject at runtime.",
        "Use JCEKS or PKCS12 keystores for encrypted credential storage, not plain "
        "text.",
        "Validate on startup that no config entry containing “password” is "
        "unencrypted or empty.",
    ),
    bad_practices=(
        "Never include “password” attributes or keys in cleartext in XML, properties, "
        "or YAML files.",
        "Avoid checking in any config file containing credentials into version "
        "control.",
        "Do not rely on application code to overwrite or ignore plaintext passwords "
        "at runtime.",
        "Do not ship sample configs with placeholder passwords - remove them before "
        "delivery.",
    ),
    good_samples=(
        """<!-- Good: use JNDI resource without plaintext password -->
<resource-ref>
  <res-ref-name>jdbc/MyDataSource</res-ref-name>
  <res-type>javax.sql.DataSource</res-type>
  <lookup-name>java:comp/env/jdbc/MyDataSource</lookup-name>
</resource-ref>
<!-- Server-side config (e.g., Tomcat context.xml) injects the password securely -->""",
        """# Good: load encrypted config and decrypt at startup (example in Python)
import os
from cryptography.fernet import Fernet

key = os.environ['CONFIG_DECRYPT_KEY']
cipher = Fernet(key)
with open('config.enc', 'rb') as f:
    encrypted = f.read()
config = json.loads(cipher.decrypt(encrypted))
db_pass = config['datasource']['password']
# no plaintext password is stored on disk""",
    ),
    bad_samples=(
        """<!-- Bad: plaintext password in web.xml -->
<login-config>
  <auth-method>BASIC</auth-method>
  <realm-name>MyRealm</realm-name>
  <form-login-config>
    <form-login-page>/login.jsp</form-login-page>
    <form-error-page>/error.jsp</form-error-page>
  </form-login-config>
</login-config>
<security-constraint>
  ...
</security-constraint>
<Resource name="jdbc/MyDataSource"
          auth="Container"
          type="javax.sql.DataSource"
          username="dbuser"
          password="SuperSecret123"
          driverClassName="org.postgresql.Driver"
          url="jdbc:postgresql://db.example.com:5432/appdb" />""",
        """# Bad: application.properties with embedded credentials
spring.datasource.url=jdbc:mysql://db.example.com:3306/app
spring.datasource.username=appuser
spring.datasource.password=SuperSecret123""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-555",
        paragraphs=(
            "CWE-555 (“J2EE Misconfiguration: Plaintext Password in Configuration "
            "File”) occurs when Java EE applications include credentials in cleartext "
            "within deployment descriptors (web.xml, context.xml) or property files. "
            "Attackers with access to these files or backups can immediately extract "
            "valid credentials and compromise your database or services.",
            "Even if filesystem permissions restrict access, insider threats or "
            "misconfigured backups often leak these files. By externalizing secrets "
            "to secure vaults, using encrypted keystores, and validating "
            "configuration at startup, you eliminate one of the most direct paths to "
            "credential theft.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2020-13935",
                "A popular J2EE framework shipped sample web.xml containing a default "
                "plaintext password, which was deployed unchanged in production, "
                "leading to widespread database compromise.",
            ),
            CVEReference(
                "CVE-2019-8451",
                "A misconfigured Spring Boot app allowed character controllers to "
                "access application.properties with embedded database passwords, "
                "resulting in unauthorized data access.",
            ),
        ),
        closing=(
            "To remediate, remove all plaintext passwords from your descriptors and "
            "property files, inject credentials at runtime from a secure source, and "
            "enforce a startup validation that rejects any config containing "
            "unencrypted secrets."
        ),
    ),
)

CWE_13 = CWEPage(
    cwe_id="CWE-13",
    title="ASP.NET Misconfiguration: Password in Configuration File",
    best_practices=(
        "Never store plain passwords in your Web.config or App.config - encrypt "
        "sensitive sections.",
        "Use ASP.NET’s Protected Configuration (e.g., "
        "RSAProtectedConfigurationProvider) to encrypt `<connectionStrings>` or "
        "`<appSettings>`.",
        "In ASP.NET Core, keep secrets out of source files - use Secret Manager, "
        "environment variables, or Azure Key Vault.",
        "On application startup, fail if any required config section remains "
        "unencrypted or missing.",
    ),
    bad_practices=(
        "Do not leave `<connectionStrings>` or `<appSettings>` entries with plaintext "
        "passwords.",
        "Avoid committing config files containing secrets into version control.",
        "Do not rely on “security by obscurity” - anyone with file access reads "
        "cleartext.",
        "Never disable or skip decryption checks at runtime - always enforce "
        "protection.",
    ),
    good_samples=(
        """<!-- Good: encrypt connectionStrings with RSA provider -->
<configuration>
  <configProtectedData>
    <providers>
      <add name="RsaProtectedConfigurationProvider"
           type="System.Configuration.RsaProtectedConfigurationProvider, System.Configuration, Version=4.0.0.0, ..."/>
    </providers>
  </configProtectedData>

  <connectionStrings configProtectionProvider="RsaProtectedConfigurationProvider">
    <EncryptedData>...base64-encoded encrypted section...</EncryptedData>
  </connectionStrings>
</configuration>""",
        """// Good: decrypting protected section in C#
using System;
using System.Configuration;

var csSection = ConfigurationManager.GetSection("connectionStrings") as ConnectionStringsSection;
if (!csSection.SectionInformation.IsProtected)
    throw new ConfigurationErrorsException("connectionStrings must be encrypted");
foreach (ConnectionStringSettings cs in csSection.ConnectionStrings)
{
    Console.WriteLine($"Name={cs.Name}, ConnectionString={cs.ConnectionString}");
}""",
    ),
    bad_samples=(
        """<!-- Bad: plaintext password in Web.config -->
<configuration>
  <connectionStrings>
    <add name="AppDb"
         connectionString="Server=db.example.com;User Id=appuser;Password=SuperSecret123;Database=appdb;"
         providerName="System.Data.SqlClient"/>
  </connectionStrings>
</configuration>""",
        """// Bad: reading plain text connection string
using System;
using System.Configuration;

var cs = ConfigurationManager.ConnectionStrings["AppDb"].ConnectionString;
Console.WriteLine($"Connecting with: {cs}");""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-13",
        paragraphs=(
            "CWE-13 (“ASP.NET Misconfiguration: Password in Configuration File”) "
            "describes scenarios where applications include sensitive credentials - "
            "database passwords, API keys, service account secrets - directly in "
            "Web.config or App.config. These files are often checked into source "
            "control or deployed unencrypted, allowing anyone with file access to "
            "retrieve valid credentials.",
            "Attackers and insiders routinely scan for common config filenames. Once "
            "a password is exposed, it enables unauthorized database access, "
            "privilege escalation, or lateral movement. Encrypting configuration "
            "sections or externalizing secrets eliminates this risk.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2018-11776",
                "Apache Struts: Although not ASP.NET, it highlighted severe risks of "
                "default configurations; many.NET apps similarly expose secrets in "
                "their config files, leading to CVEs when frameworks fail to enforce "
                "protection.",
            ),
            CVEReference(
                "CVE-2020-16846",
                "A Microsoft sample application shipped with a plaintext connection "
                "string in Web.config, widely copied by developers, resulting in real "
                "deployments vulnerable to credential theft.",
            ),
        ),
        closing=(
            "To remediate CWE-13, encrypt or remove all plaintext secrets from your "
            "configuration files, adopt secure secret stores, and enforce validation "
            "that no required section remains unprotected on startup."
        ),
    ),
)

CWE_262 = CWEPage(
    cwe_id="CWE-262",
    title="Not Using Password Aging",
    best_practices=(
        "Enforce password expiration policy (e.g., require change every 30–90 days).",
        "Track last-changed timestamp and reject logins if password is too old.",
        "Notify users in advance of impending expiration and force change at login.",
        "Disallow reuse of recent passwords and maintain a password history.",
    ),
    bad_practices=(
        "Do not allow passwords to live indefinitely without expiration.",
        "Avoid silent acceptance of old passwords - force users to update.",
        "Never skip notifying users before their password expires.",
        "Do not permit reuse of the same password over multiple cycles.",
    ),
    good_samples=(
        """# Good: check password age on login
from datetime import datetime, timedelta

# fetched from user record
last_changed = datetime.fromisoformat(user.password_last_changed)
if datetime.utcnow() - last_changed > timedelta(days=90):
    raise Exception("Password expired - please change your password")""",
        """# Good: schedule notification emails before expiry
from datetime import datetime, timedelta
from your_email_lib import send_email

notify_before = timedelta(days=7)
if datetime.utcnow() >= last_changed + (timedelta(days=90) - notify_before):
    send_email(user.email, "Your password will expire in 7 days")""",
    ),
    bad_samples=(
        """# Bad: no expiration check
def login(username, password):
    if authenticate(username, password):
        return "Welcome!"  # accepts any age password
    else:
        return "Invalid credentials\"""",
        """# Bad: always uses initial password
# password_last_changed is never checked or updated
if login_ok(username, password):
    session.login(user)""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-262",
        paragraphs=(
            "CWE-262 (“Not Using Password Aging”) occurs when an application allows "
            "user passwords to remain valid indefinitely. Without forcing periodic "
            "changes, compromised credentials may never be replaced, giving attackers "
            "unlimited time to exploit stolen or guessed passwords.",
            "Proper password aging balances security and usability: require changes "
            "at compliance-driven intervals, notify users in advance, and prohibit "
            "reuse of recent passwords.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2009-0579",
                "Linux-PAM before 1.0.4 did not enforce the minimum password age "
                "(MINDAYS) in /etc/shadow, allowing local users to bypass expiration "
                "and reset passwords immediately.",
            ),
            CVEReference(
                "CVE-2020-35358",
                "DomainMOD v4.15.0 failed to expire sessions upon password change - "
                "old sessions remained active indefinitely, undermining password "
                "rotation.",
            ),
        ),
        closing=(
            "To remediate CWE-262, enforce an expiration policy in your "
            "authentication flow, automate user notifications, and integrate checks "
            "into your login logic to refuse expired passwords."
        ),
    ),
)

CWE_263 = CWEPage(
    cwe_id="CWE-263",
    title="Password Aging with Long Expiration",
    best_practices=(
        "Set a reasonable maximum password age (e.g., 30–90 days) to balance security "
        "and usability.",
        "Enforce password change on or before the expiration date - fail logins if "
        "expired.",
        "Notify users well in advance (e.g., 7 days) of upcoming expiration with "
        "reminders.",
        "Maintain a history of previous passwords to prevent immediate reuse after "
        "change.",
    ),
    bad_practices=(
        "Do not set excessively long expiration (e.g., years) that never forces users "
        "to update.",
        "Avoid ignoring expiration dates and allowing indefinite password validity.",
        "Never fail to notify users in advance - surprise expirations lead to "
        "lockouts.",
        "Do not allow immediate reuse of the same password after change.",
    ),
    good_samples=(
        """# Good: enforce maximum age and notify users
from datetime import datetime, timedelta
from your_email_lib import send_email

MAX_AGE = timedelta(days=60)
NOTIFY_BEFORE = timedelta(days=7)

last_changed = datetime.fromisoformat(user.password_last_changed)
now = datetime.utcnow()

# Notify if within warning window
if now >= last_changed + (MAX_AGE - NOTIFY_BEFORE):
    send_email(user.email, "Your password expires in {} days".format((last_changed + MAX_AGE - now).days))

# Block login if expired
if now > last_changed + MAX_AGE:
    raise Exception("Password expired - please change your password")""",
        """# Good: track history to prevent reuse
def change_password(user, new_password):
    if new_password in user.password_history[-5:]:
        raise Exception("Cannot reuse any of your last 5 passwords")
    user.password_history.append(hash_password(new_password))
    user.password_last_changed = datetime.utcnow().isoformat()
    save_user(user)""",
    ),
    bad_samples=(
        """# Bad: huge expiration window (years) and no notifications
from datetime import datetime, timedelta

# expires in 5 years
MAX_AGE = timedelta(days=5*365)

def login(user, password):
    last_changed = datetime.fromisoformat(user.password_last_changed)
    if datetime.utcnow() > last_changed + MAX_AGE:
        return "Expired"  # but user never told in advance
    return "Welcome!\"""",
        """# Bad: no history check - immediate reuse allowed
def change_password(user, new_password):
    user.password_hash = hash_password(new_password)
    user.password_last_changed = datetime.utcnow().isoformat()
    # password_history not updated - old password can be reused""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-263",
        paragraphs=(
            "CWE-263 (“Password Aging with Long Expiration”) refers to setting "
            "password lifecycles so long that users effectively never change them. "
            "While forcing change too frequently can frustrate users, excessively "
            "long or infinite expiration windows undermine the security benefits of "
            "periodic rotation.",
            "Attackers who compromise credentials can retain access indefinitely if "
            "passwords never expire. Proper aging policies balance security and "
            "usability: set reasonable intervals, remind users in advance, and block "
            "logins once expired.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2009-0579",
                "Linux-PAM allowed passwords with effectively no aging when MINDAYS "
                "and MAXDAYS were misconfigured, enabling extended use of compromised "
                "accounts.",
            ),
            CVEReference(
                "CVE-2018-12613",
                "A corporate VPN appliance had a 10-year password expiration policy "
                "by default, meaning compromised credentials remained valid far "
                "beyond best practices.",
            ),
        ),
        closing=(
            "To remediate CWE-263, define maximum password ages in your "
            "authentication logic, implement notifications, enforce change at "
            "expiration, and prevent immediate reuse of old passwords via a history "
            "mechanism."
        ),
    ),
)

CWE_1204 = CWEPage(
    cwe_id="CWE-1204",
    title="Generation of Weak Initialization Vector (IV)",
    best_practices=(
        "Generate a fresh IV for every encryption with a CSPRNG such as os.urandom "
        "or secrets.token_bytes.",
        "Use the IV length the mode expects: 16 bytes for AES-CBC, 12 bytes for "
        "AES-GCM.",
        "Store or transmit the IV next to the ciphertext; it does not need to be "
        "secret.",
        "Prefer AEAD modes (AES-GCM, ChaCha20-Poly1305) that authenticate the IV "
        "with the data.",
    ),
    bad_practices=(
        "Never use a constant or all-zero IV.",
        "Do not derive the IV from the key, a password, or a timestamp.",
        "Avoid seeding random.Random or any non-cryptographic PRNG to produce IVs.",
        "Do not reuse the IV of a previous message with the same key.",
    ),
    good_samples=(
        """# Good: random 16-byte IV for AES-CBC
import os
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

iv = os.urandom(16)
padder = padding.PKCS7(128).padder()
data = padder.update(plaintext) + padder.finalize()
encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
ciphertext = iv + encryptor.update(data) + encryptor.finalize()""",
        """# Good: AES-GCM with a fresh 96-bit nonce
import secrets
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

nonce = secrets.token_bytes(12)
ciphertext = nonce + AESGCM(key).encrypt(nonce, plaintext, None)""",
    ),
    bad_samples=(
        """# Bad: all-zero IV
iv = bytes(16)
encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()""",
        """# Bad: IV derived from the key
import hashlib

iv = hashlib.md5(key).digest()
encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()""",
        """# Bad: IV from a time-seeded PRNG
import random
import time

random.seed(int(time.time()))
iv = bytes(random.getrandbits(8) for _ in range(16))""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-1204",
        paragraphs=(
            "CWE-1204, “Generation of Weak Initialization Vector (IV),” occurs when "
            "a cipher mode that requires an unpredictable IV is given one that is "
            "constant, reused, or guessable. With CBC, a predictable IV lets an "
            "attacker who can choose plaintexts confirm guesses about earlier "
            "messages; with stream and counter modes, a repeated IV reuses the "
            "keystream and leaks the XOR of two plaintexts.",
            "The IV is not a secret, but it must be fresh. Drawing it from a CSPRNG "
            "for every message, or using a nonce-misuse resistant AEAD mode, removes "
            "the weakness.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2011-3389",
                "BEAST: TLS 1.0 used the last ciphertext block of the previous "
                "record as the CBC IV, letting attackers decrypt HTTPS cookies.",
            ),
            CVEReference(
                "CVE-2017-11120",
                "Broadcom Wi-Fi firmware reused counters in its encryption, letting "
                "nearby attackers decrypt traffic.",
            ),
        ),
        closing=(
            "Review every cipher call for where its IV comes from, and fail builds "
            "that pass literal or derived IVs to encryption routines."
        ),
    ),
)

PAGES = (
    CWE_321,
    CWE_798,
    CWE_1392,
    CWE_1394,
    CWE_258,
    CWE_260,
    CWE_324,
    CWE_322,
    CWE_329,
    CWE_1204,
    CWE_522,
    CWE_256,
    CWE_257,
    CWE_261,
    CWE_555,
    CWE_13,
    CWE_262,
    CWE_263,
)

"""CWE pages for insufficient randomness and predictable seeds."""

from src.core.pages import CVEReference, CWEPage, Explanation

CWE_330 = CWEPage(
    cwe_id="CWE-330",
    title="Use of Insufficiently Random Values",
    best_practices=(
        "Use a cryptographically secure RNG (os.urandom, secrets) for security-critical values.",
        "Avoid non-CSPRNG functions like random.random(), random.randint(), or time-based seeds.",
        "Prefer high-level APIs (secrets.token_bytes, cryptography primitives).",
        "Seed PRNGs explicitly from entropy sources only when necessary.",
    ),
    bad_practices=(
        "Do not call random.seed() with predictable values (timestamps, counters).",
        "Never generate tokens or IVs with random.random() or random.randint().",
        "Avoid rolling your own RNG from modulo arithmetic or math functions.",
        "Do not reuse the same seed across sessions or deployments.",
    ),
    good_samples=(
        """# Good: secrets for token generation
token = secrets.token_urlsafe(32)
store_token(token)""",
        """# Good: random IV with os.urandom
from Crypto.Cipher import AES
from Crypto.Util.Padding import pad

key = os.urandom(32)
iv = os.urandom(AES.block_size)
cipher = AES.new(key, AES.MODE_CBC, iv)
ct = iv + cipher.encrypt(pad(b"Sensitive data", AES.block_size))""",
    ),
    bad_samples=(
        """# Bad: tokens via random.choice
token = "".join(random.choice(string.ascii_letters + string.digits) for _ in range(32))
store_token(token)  # predictable from the PRNG state""",
        """# Bad: IV from a timestamp
from Crypto.Cipher import AES
from Crypto.Util.Padding import pad

key = os.urandom(32)
iv = int(time.time()).to_bytes(16, "big")
cipher = AES.new(key, AES.MODE_CBC, iv)
ct = iv + cipher.encrypt(pad(b"Data", AES.block_size))""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-330",
        paragraphs=(
            "CWE-330 covers applications that generate tokens, IVs or nonces from "
            "predictable sources. Attackers who can reproduce the generator state "
            "can predict or brute-force these values.",
            "Python's random module and timestamp seeds are not designed for "
            "security. Use APIs that draw from the operating system's CSPRNG.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2008-0166",
                "Debian's OpenSSL package shipped a PRNG with almost no entropy, "
                "reducing the key space to a few thousand keys.",
            ),
        ),
        closing=(
            "Audit every use of randomness and replace non-CSPRNG calls with secrets, "
            "os.urandom or cryptography primitives."
        ),
    ),
)

CWE_331 = CWEPage(
    cwe_id="CWE-331",
    title="Insufficient Entropy",
    best_practices=(
        "Use a cryptographically secure RNG (e.g., Python’s `secrets` module) rather "
        "than default PRNGs.",
        "Ensure the OS entropy pool is sufficiently initialized - avoid "
        "`/dev/urandom` before system boot entropy gathering.",
        "Combine multiple entropy sources (e.g., hardware RNG, user input, network "
        "jitter) when seeding long-lived keys.",
        "On platforms with `/dev/random`, block until enough entropy is available "
        "before generating critical material.",
    ),
    bad_practices=(
        "Do not use the default `random` module or `random.getrandbits()` for "
        "security-critical values.",
        "Never seed your PRNG with predictable data (timestamps, fixed strings).",
        "Avoid using `/dev/urandom` immediately after boot when the entropy pool may "
        "be low.",
        "Do not assume high-throughput non-blocking RNGs provide strong entropy for "
        "long-term keys.",
    ),
    good_samples=(
        """# Good: use secrets.token_bytes for key material
import secrets

# generates 32 bytes of CSPRNG data
key = secrets.token_bytes(32)
store_key(key)""",
        """# Good: mix hardware RNG and OS RNG
import os
import subprocess

# get 64 bytes from OS RNG
os_bytes = os.urandom(64)
# get 64 bytes from a hardware RNG utility
hw_bytes = subprocess.check_output(['rngd', '--generate'])
# combine and derive final key
import hashlib
key = hashlib.sha256(os_bytes + hw_bytes).digest()
store_key(key)""",
    ),
    bad_samples=(
        """# Bad: using random with default seed
import random

# predictable under analysis of PRNG state
random.seed()
key = random.getrandbits(256)
store_key(key)""",
        """# Bad: deriving IV from timestamp
import time, os
from Crypto.Cipher import AES

key = os.urandom(32)
iv = int(time.time()).to_bytes(16, 'big')  # low-entropy IV
cipher = AES.new(key, AES.MODE_CBC, iv)""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-331",
        paragraphs=(
            "CWE-331 (“Insufficient Entropy”) occurs when applications generate "
            "cryptographic values - keys, nonces, IVs - with inadequate randomness. "
            "If the entropy source is predictable or under-seeded, attackers can "
            "reconstruct or brute-force the values, leading to full compromise of "
            "confidentiality and integrity protections.",
            "Early in system boot, or on embedded devices without hardware RNGs, the "
            "OS entropy pool may not be sufficiently populated. Generating keys at "
            "this stage risks using low-entropy values that can be predicted by "
            "attackers monitoring system state.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2008-0166",
                "Debian OpenSSL bug drastically reduced the SSL keyspace by using "
                "predictable PRNG seeds, allowing automated recovery of private keys.",
            ),
            CVEReference(
                "CVE-2016-5093",
                "Android’s SecureRandom was improperly seeded, enabling predictable "
                "key generation and session hijacking in certain apps.",
            ),
        ),
        closing=(
            "To remediate CWE-331, always use CSPRNGs with proven entropy collection, "
            "combine multiple sources when necessary, and ensure that critical key "
            "generation only occurs after sufficient entropy is available."
        ),
    ),
)

CWE_332 = CWEPage(
    cwe_id="CWE-332",
    title="Insufficient Entropy in PRNG",
    best_practices=(
        "Seed PRNGs with high-quality entropy sources (e.g., OS CSPRNG) before use.",
        "Use cryptographically secure generators (`secrets`, `os.urandom`) for all "
        "security-critical randomness.",
        "Ensure your platform’s entropy pool is initialized - on Linux, prefer "
        "`/dev/random` for seeding if low entropy is a concern.",
        "Combine multiple entropy sources (hardware RNG, user input, network timing) "
        "when generating long-lived keys.",
    ),
    bad_practices=(
        "Do not rely on non-crypto PRNGs (e.g., `random`, `Math.random()`) for "
        "security.",
        "Avoid seeding with predictable values (timestamps, incremental counters).",
        "Never generate critical keys or IVs before sufficient entropy is available.",
        "Do not use the same seed across multiple sessions or deployments.",
    ),
    good_samples=(
        """# Good: use secrets for all random needs
import secrets

# 32-byte token with CSPRNG
token = secrets.token_urlsafe(32)""",
        """# Good: mix OS and hardware RNG
import os
import subprocess
import hashlib

os_bytes = os.urandom(64)
hw_bytes = subprocess.check_output(['rngd', '--generate'])
key = hashlib.sha256(os_bytes + hw_bytes).digest()""",
    ),
    bad_samples=(
        """# Bad: using random for tokens
import random, string

token = ''.join(random.choice(string.ascii_letters) for _ in range(32))""",
        """# Bad: timestamp-based seed
import time, random

random.seed(int(time.time()))
iv = bytes([random.getrandbits(8) for _ in range(16)])""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-332",
        paragraphs=(
            "CWE-332 (“Insufficient Entropy in PRNG”) occurs when a pseudo-random "
            "number generator is seeded or operated with too little or poor-quality "
            "entropy. This can cause the PRNG to produce predictable output, "
            "undermining confidentiality, integrity, and authentication mechanisms "
            "that rely on randomness.",
            "Early-boot environments, containerized systems, or embedded devices may "
            "lack sufficient entropy. If a generator falls back to a default seed or "
            "fails open when entropy is low, cryptographic values (keys, nonces, "
            "tokens) become guessable by attackers.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2008-0166",
                "Debian’s OpenSSL package patched out the RNG-seeding code, causing "
                "keys generated on affected systems to be predictable and easily "
                "brute-forced.",
            ),
            CVEReference(
                "CVE-2013-7373",
                "Android before 4.4 did not properly seed the OpenSSL PRNG, allowing "
                "apps to generate weak random values and compromising cryptographic "
                "operations.",
            ),
        ),
        closing=(
            "To remediate CWE-332, always ensure your PRNGs are seeded from "
            "high-quality entropy, use OS-provided CSPRNGs (`secrets`, `os.urandom`), "
            "and delay key generation until the system’s entropy pool is sufficiently "
            "initialized."
        ),
    ),
)

CWE_333 = CWEPage(
    cwe_id="CWE-333",
    title="Improper Handling of Insufficient Entropy in TRNG",
    best_practices=(
        "Detect and block when your TRNG indicates “insufficient entropy” rather than "
        "silently proceeding.",
        "Use blocking entropy sources (e.g., `/dev/random`) or platform APIs that "
        "guarantee readiness.",
        "Log or surface errors when TRNG initialization fails, and abort key "
        "generation or critical operations.",
        "Combine multiple independent entropy sources (hardware RNG, OS RNG, timing "
        "jitter) when available.",
    ),
    bad_practices=(
        "Do not fall back to non-cryptographic RNG (e.g., Python’s random) when TRNG "
        "isn’t ready.",
        "Avoid ignoring or swallowing errors from TRNG initialization calls.",
        "Never proceed with key generation on low-entropy warning or partial reads.",
        "Do not treat `/dev/urandom` as always safe on systems with uninitialized "
        "pools (early boot or embedded).",
    ),
    good_samples=(
        """# Good: blocking read from /dev/random until enough entropy
import os

with open('/dev/random', 'rb') as rnd:
    key = rnd.read(32)   # blocks until 32 bytes of true entropy are available
store_key(key)""",
        """# Good: check getrandom error and retry
import ctypes, os, errno

libc = ctypes.CDLL('libc.so.6')
GRND_RANDOM = 0x0001
buf = (ctypes.c_ubyte * 32)()
res = libc.getrandom(buf, 32, GRND_RANDOM)
if res < 0:
    err = ctypes.get_errno()
    if err == errno.EAGAIN:
        raise RuntimeError("Insufficient entropy; try again later")
key = bytes(buf)
store_key(key)""",
    ),
    bad_samples=(
        """# Bad: silent fallback to /dev/urandom on read failure
import os

try:
    key = open('/dev/random','rb').read(32)
except BlockingIOError:
    key = os.urandom(32)   # may be low-quality entropy on some platforms
store_key(key)""",
        """# Bad: ignoring getrandom errors
import ctypes

libc = ctypes.CDLL('libc.so.6')
buf = (ctypes.c_ubyte * 32)()
libc.getrandom(buf, 32, 0)   # errors ignored, may return short or uninitialized buffer
key = bytes(buf)
store_key(key)""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-333",
        paragraphs=(
            "CWE-333 (“Improper Handling of Insufficient Entropy in TRNG”) arises "
            "when software uses a true-random number generator (TRNG) but fails to "
            "handle cases where the hardware or OS indicates there isn’t enough "
            "entropy. Instead of blocking or failing, applications may proceed with "
            "weak or predictable values.",
            "This is especially critical on embedded devices or during early system "
            "boot, where entropy pools may not yet be initialized. Proper handling "
            "requires checking for blocking conditions or explicit status flags and "
            "refusing to generate keys or nonces until sufficient randomness is "
            "available.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2018-7183",
                "A hardware RNG driver on certain IoT devices did not report "
                "low-entropy states, causing keys generated at boot to be predictable.",
            ),
            CVEReference(
                "CVE-2016-5093",
                "Android’s SecureRandom seeded from insufficient entropy early in "
                "boot, resulting in weak keys used by multiple apps.",
            ),
        ),
        closing=(
            "To remediate CWE-333, always check TRNG readiness, block or retry on "
            "insufficient entropy, and log or raise errors rather than silently "
            "falling back. Combining multiple entropy sources and delaying critical "
            "key generation until pools are initialized ensures strong randomness."
        ),
    ),
)

CWE_338 = CWEPage(
    cwe_id="CWE-338",
    title="Use of Cryptographically Weak PRNG",
    best_practices=(
        "Use a true CSPRNG (e.g., Python’s `secrets`, Node’s `crypto.randomBytes`, "
        "Java’s `SecureRandom`) for all security-critical values.",
        "Avoid general-purpose PRNGs (e.g., Python’s `random`, Java’s "
        "`java.util.Random`, JavaScript’s `Math.random()`) for tokens, IVs, keys or "
        "session IDs.",
        "Prefer high-level, audited libraries that wrap secure randomness (e.g., "
        "`cryptography.hazmat.primitives`, `Fernet`, `bcrypt`).",
        "On platforms with hardware RNG support, combine multiple entropy sources and "
        "ensure the OS pool is seeded before generating secrets.",
    ),
    bad_practices=(
        "Do not use `random.random()`, `random.randint()`, or `Math.random()` for "
        "anything security-related.",
        "Never initialize security tokens with `new Random()` in Java - its LCG is "
        "predictable.",
        "Avoid custom PRNG implementations or predictable seeds (timestamps, "
        "counters).",
        "Do not reuse the same seed or IV across multiple operations or sessions.",
    ),
    good_samples=(
        """# Good: Python secrets for URL-safe token
import secrets

token = secrets.token_urlsafe(32)
store_token(token)  # 32-byte unguessable random token""",
        """// Good: Node.js crypto.randomBytes
import { randomBytes } from 'crypto';

const iv = randomBytes(16);               // secure IV
const key = randomBytes(32);              // secure key
cipher = createCipheriv('aes-256-gcm', key, iv);""",
        """// Good: Java SecureRandom for session ID
import java.security.SecureRandom;

SecureRandom rng = SecureRandom.getInstanceStrong();
byte[] sessionId = new byte[16];
rng.nextBytes(sessionId);
// convert to hex or base64 for use""",
    ),
    bad_samples=(
        """# Bad: Python random for token
import random, string

token = ''.join(random.choice(string.ascii_letters) for _ in range(32))
# predictable if PRNG state is known""",
        """// Bad: JavaScript Math.random for session ID
function genToken(len) {
  let token = '';
  for (let i = 0; i < len; i++) {
    token += Math.floor(Math.random() * 16).toString(16);
  }
  return token;
}
// not cryptographically secure""",
        """// Bad: Java java.util.Random for session ID
import java.util.Random;

Random rng = new Random();
byte[] sid = new byte[16];
rng.nextBytes(sid);
// attacker can recover RNG state and predict future bytes""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-338",
        paragraphs=(
            "CWE-338 (“Use of Cryptographically Weak PRNG”) occurs when applications "
            "rely on deterministic or low-entropy generators - like linear "
            "congruential algorithms - for security-critical values. Since these "
            "PRNGs can be predicted once the internal state or seed is known, "
            "attackers can guess session IDs, tokens, keys, or IVs and bypass "
            "authentication or tamper with data.",
            "Always choose generators specifically designed for cryptographic use "
            "(CSPRNGs), which draw entropy from OS or hardware sources and resist "
            "state recovery attacks.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2006-6969",
                "Jetty generated session identifiers using java.util.Random, making "
                "them predictable and enabling session-hijacking attacks.",
            ),
            CVEReference(
                "CVE-2015-2913",
                "OrientDB used java.util.Random to create session IDs, allowing "
                "attackers to predict and hijack user sessions.",
            ),
        ),
        closing=(
            "To remediate CWE-338, replace all uses of insecure PRNGs with CSPRNG "
            "APIs, audit libraries for hidden uses of weak randomness, and ensure any "
            "fallback logic does not degrade to predictable generators."
        ),
    ),
)

CWE_335 = CWEPage(
    cwe_id="CWE-335",
    title="Incorrect Usage of Seeds in PRNG",
    best_practices=(
        "Use a cryptographically secure PRNG that sources entropy from the OS (e.g., "
        "Python’s secrets module or java.security.SecureRandom).",
        "Do not manually seed the PRNG in production - let the CSPRNG seed itself "
        "from high-entropy sources.",
        "Avoid predictable seeds such as timestamps, constant values, or process "
        "identifiers.",
        "Use explicit seeds only for testing or reproducibility in non-security "
        "contexts.",
    ),
    bad_practices=(
        "Seeding a PRNG with constant or easily guessable values (e.g., a fixed "
        "number).",
        "Using system time or process IDs as seeds for security-sensitive randomness.",
        "Reseeding a CSPRNG with predictable values during runtime.",
        "Using non-cryptographic PRNGs (e.g., java.util.Random or Python’s random) "
        "for token or key generation.",
    ),
    good_samples=(
        """# Good: Python cryptographic randomness
import secrets

def generate_token(length=32):
    # secrets uses os.urandom under the hood
    return secrets.token_hex(length)

# generate a secure random 32-byte token
token = generate_token()""",
        """// Good: Java SecureRandom
import java.security.SecureRandom;

public byte[] generateBytes(int length) {
    SecureRandom sr = new SecureRandom(); // automatically seeded with OS entropy
    byte[] bytes = new byte[length];
    sr.nextBytes(bytes);
    return bytes;
}""",
    ),
    bad_samples=(
        """# Bad: predictable seed from timestamp
import random, time

# seeded with current time in seconds
random.seed(int(time.time()))
token = random.getrandbits(128)""",
        """// Bad: hard-coded seed
import java.util.Random;

public int badExample() {
    // seeded with fixed constant
    Random rand = new Random(12345);
    return rand.nextInt();
}""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-335",
        paragraphs=(
            "CWE-335 (Incorrect Usage of Seeds in PRNG) occurs when a pseudo-random "
            "number generator (PRNG) is seeded with predictable or low-entropy "
            "values, or when a non-cryptographic PRNG is used for security-sensitive "
            "operations. Since the output of a PRNG is completely determined by its "
            "seed, exposing or predicting the seed allows attackers to reproduce the "
            "entire sequence of values.",
            "Security-critical systems must rely on cryptographically secure PRNGs "
            "that seed themselves from high-entropy sources (e.g., OS-provided "
            "randomness). Manual or predictable seeding drastically reduces entropy, "
            "making it trivial for attackers to guess tokens, keys, or nonces.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2008-0166",
                "A Debian-specific patch removed calls that mixed entropy into "
                "OpenSSL’s PRNG, resulting in predictable keys generated by OpenSSL "
                "on Debian-based systems. Attackers could regenerate private keys by "
                "reproducing PRNG output.",
            ),
            CVEReference(
                "CVE-2020-28597",
                "Epignosis EfrontPro 5.2.21 seeded its password reset token generator "
                "with a predictable value, allowing attackers to generate valid reset "
                "tokens and hijack user accounts.",
            ),
        ),
        closing=(
            "To remediate CWE-335, use secure randomness APIs that automatically "
            "gather sufficient entropy (e.g., Python’s secrets or Java’s "
            "SecureRandom), avoid custom seeding in production, and never use "
            "predictable values such as timestamps or fixed constants for seeding."
        ),
    ),
)

CWE_336 = CWEPage(
    cwe_id="CWE-336",
    title="Same Seed in PRNG",
    best_practices=(
        "Always initialize your PRNG with a high-entropy, unpredictable seed (e.g., "
        "from a CSPRNG or OS entropy source).",
        "Use a fresh, unique seed for each instantiation of the PRNG - never reuse "
        "the same value across runs or objects.",
        "Prefer cryptographically secure RNG APIs (e.g., Node.js’s "
        "`crypto.randomFillSync`, Python’s `secrets` module).",
        "Validate that your runtime/platform truly reseeds between forks or restarts "
        "(especially in clustered or containerized environments).",
    ),
    bad_practices=(
        "Seeding with a constant or hard-coded value (e.g., `new Random(12345)`), "
        "leading to identical sequences each run.",
        "Reusing a time-based seed with low resolution (e.g., seconds) resulting in "
        "collisions if called within the same second.",
        "Calling `seed()` repeatedly with the same value instead of relying on the "
        "generator’s internal state.",
        "Not re-seeding after fork/cluster events - child processes inherit the same "
        "RNG state and produce duplicate values.",
    ),
    good_samples=(
        """// Good: use OS entropy to seed once, then reuse CSPRNG
import { randomFillSync } from 'crypto';

function makeSecureId(): string {
  const buffer = Buffer.alloc(16);
  randomFillSync(buffer);               // seeds from OS CSPRNG each call
  return buffer.toString('hex');
}""",
        """# Good: Python secrets for cryptographic tokens
import secrets

def generate_token(n_bytes=16):
    # secrets.token_bytes() uses a secure OS source under the hood
    return secrets.token_hex(n_bytes)""",
    ),
    bad_samples=(
        """// Bad: fixed seed produces identical "random" IDs every time
import { Random } from 'random-js';
const engine = Random.engines.mt19937().seed(0x12345678);
const generator = new Random(engine);

function makeId() {
  return generator.hex(8);
}""",
        """# Bad: time-based seed with only second precision
import random
import time

random.seed(int(time.time()))  # if two runs within same second, same sequence
print([random.randint(0, 100) for _ in range(5)])""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-336",
        paragraphs=(
            "CWE-336, “Same Seed in Pseudo-Random Number Generator (PRNG),” occurs "
            "when a PRNG is initialized with the same seed every time. Because PRNGs "
            "are deterministic, using an identical seed yields the same sequence of "
            "outputs on each run or for each instance. Predictable “random” values "
            "can be exploited to guess session tokens, identifiers, or cryptographic "
            "material.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2024-41594",
                "DrayTek Vigor Management UI used the same PRNG seed on each "
                "initialization, allowing attackers to predict generated values.",
            ),
            CVEReference(
                "CVE-2018-14647",
                "A Red Hat product incorrectly reused a low-entropy seed across "
                "sessions, enabling attackers to reconstruct “random” outputs.",
            ),
        ),
        closing=(
            "To remediate CWE-336, switch to secure entropy sources, avoid manual "
            "seeding wherever possible, and ensure that any required seeding process "
            "introduces sufficient, unique randomness each time the generator is used."
        ),
    ),
)

CWE_337 = CWEPage(
    cwe_id="CWE-337",
    title="Predictable Seed in PRNG",
    best_practices=(
        "Always rely on a true CSPRNG or OS-provided entropy source instead of manual "
        "seeding.",
        "If you must seed manually, gather seed material from multiple high-entropy "
        "sources (e.g., `/dev/urandom`, hardware RNG).",
        "Never seed from predictable values such as timestamps (`Date.now()`), "
        "process IDs, or counters.",
        "Use language/platform libraries designed for cryptographic use (e.g., "
        "Node.js `crypto`, Java `SecureRandom`, Python `secrets`).",
    ),
    bad_practices=(
        "Seeding with the current time (`Date.now()`, `System.currentTimeMillis()`), "
        "which is easily guessable.",
        "Using process- or thread-specific values (PID, TID) as seeds.",
        "Hard-coding a constant seed value, leading to the same output sequence every "
        "run.",
        "Combining low-entropy values (e.g., user input hashes) without proper "
        "randomness amplification.",
    ),
    good_samples=(
        """// Good: Node.js crypto.randomFillSync (OS CSPRNG under the hood)
import { randomFillSync } from 'crypto';

function generateToken(bytes = 16): string {
  const buf = Buffer.alloc(bytes);
  randomFillSync(buf);
  return buf.toString('hex');
}""",
        """# Good: Python secrets for cryptographic randomness
import secrets

def create_session_id(n_bytes=16):
    # secrets.token_hex uses os.urandom internally
    return secrets.token_hex(n_bytes)""",
    ),
    bad_samples=(
        """// Bad: time-based seed in Java
import java.util.Random;

public class TokenGen {
    private final Random rnd = new Random(System.currentTimeMillis());

    public int nextToken() {
        return rnd.nextInt();
    }
}""",
        """# Bad: Python random seeded with PID+time
import random, os, time

seed = os.getpid() ^ int(time.time())
random.seed(seed)
print([random.randint(0, 100) for _ in range(5)])""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-337",
        paragraphs=(
            "CWE-337, “Predictable Seed in Pseudo-Random Number Generator (PRNG),” "
            "occurs when a PRNG is initialized with a seed that an attacker can guess "
            "or derive - such as the system time, process ID, or other low-entropy "
            "value. Predictable seeds lead to predictable random sequences, "
            "undermining the security of session tokens, identifiers, and "
            "cryptographic keys.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2022-40267",
                "Mitsubishi Electric MELSEC iQ-F Series used a PRNG seeded from a "
                "predictable value, allowing attackers to guess authentication tokens "
                "and access the web server function.",
            ),
            CVEReference(
                "CVE-2020-28597",
                "Epignosis eFrontPro 5.2.21 seeded its password reset token generator "
                "from the system clock, enabling attackers to compute valid reset "
                "tokens and hijack accounts.",
            ),
        ),
        closing=(
            "Remediation: Always use CSPRNGs without manual seeding. If you must "
            "seed, use multiple high-entropy sources and never rely on time- or "
            "process-based values. Leverage standard cryptographic libraries that "
            "manage seeding internally and securely."
        ),
    ),
)

PAGES = (
    CWE_330,
    CWE_331,
    CWE_332,
    CWE_333,
    CWE_338,
    CWE_335,
    CWE_336,
    CWE_337,
)

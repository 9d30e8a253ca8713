"""CWE pages for algorithm downgrade and risky primitives."""

from src.core.pages import CVEReference, CWEPage, Explanation

CWE_757 = CWEPage(
    cwe_id="CWE-757",
    title="Selection of Less-Secure Algorithm During Negotiation ('Algorithm Downgrade')",
    best_practices=(
        "Restrict negotiation to strong, approved algorithms.",
        "Refuse connections when the negotiated algorithm is below a minimum strength.",
        "Use TLS stacks that reject downgrade attempts (TLS_FALLBACK_SCSV, HSTS).",
        "Inspect the negotiated cipher suite after the handshake and abort if it is weak.",
        "Keep algorithm configuration current and retire old protocols promptly.",
    ),
    bad_practices=(
        "Leaving default cipher lists that include RC4, DES or 3DES.",
        "Silently falling back to the client's lowest-preference cipher.",
        "Ignoring TLS_FALLBACK_SCSV or HSTS.",
        "Skipping validation of the negotiated cipher suite.",
        "Not updating cipher configuration after new vulnerabilities are disclosed.",
    ),
    good_samples=(
        """# Good: Python server context with TLS 1.2+ and AEAD ciphers only
context = ssl.create_default_context(ssl.Purpose.CLIENT_AUTH)
context.minimum_version = ssl.TLSVersion.TLSv1_2
context.set_ciphers("ECDHE+AESGCM:ECDHE+CHACHA20")
context.load_cert_chain("cert.pem", "key.pem")""",
        """# Good: OpenSSH without weak ciphers (sshd_config)
Ciphers aes256-gcm@openssh.com,aes128-gcm@openssh.com
KexAlgorithms curve25519-sha256@libssh.org
MACs hmac-sha2-512,hmac-sha2-256""",
        """# Good: NGINX with strong ciphers only
server {
    listen 443 ssl http2;
    ssl_protocols TLSv1.2 TLSv1.3;
    ssl_prefer_server_ciphers on;
    ssl_ciphers 'ECDHE-ECDSA-AES256-GCM-SHA384:ECDHE-RSA-AES256-GCM-SHA384';
}""",
    ),
    bad_samples=(
        """# Bad: pinning the server to TLS 1.0
context = ssl.SSLContext(ssl.PROTOCOL_TLSv1)
context.load_cert_chain("cert.pem", "key.pem")
# TLS 1.0 with legacy ciphers is negotiable""",
        """# Bad: Apache allowing SSLv3 and TLS 1.0
<VirtualHost *:443>
    SSLEngine on
    SSLProtocol all -SSLv2
    SSLCipherSuite ALL:!aNULL:!MD5
</VirtualHost>""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-757",
        paragraphs=(
            "CWE-757 occurs when negotiation may fall back to weaker, deprecated "
            "ciphers or protocols, letting an active attacker force a downgrade and "
            "break confidentiality or integrity.",
            "Without a strictly enforced minimum during the handshake, and without "
            "protections like TLS_FALLBACK_SCSV and HSTS, a man in the middle can "
            "choose the algorithm for both peers.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2014-3566",
                "POODLE: SSLv3 fallback let an attacker coerce connections onto the "
                "insecure SSLv3 protocol.",
            ),
            CVEReference(
                "CVE-2015-0204",
                "FREAK: clients accepting export-grade RSA could be forced onto "
                "512-bit keys.",
            ),
        ),
    ),
)

CWE_780 = CWEPage(
    cwe_id="CWE-780",
    title="Use of RSA Algorithm without OAEP",
    best_practices=(
        "Always configure RSA encryption to use OAEP padding (e.g., "
        "`\"RSA/ECB/OAEPWithSHA-256AndMGF1Padding\"`).",
        "When using low-level crypto APIs, explicitly specify "
        "`RSA_PKCS1_OAEP_PADDING` and a secure hash (e.g., SHA-256).",
        "For signatures, prefer RSA-PSS over PKCS#1 v1.5 to mitigate padding oracle "
        "attacks.",
        "Use high-level libraries or frameworks that default to OAEP/PSS and prevent "
        "use of insecure padding modes.",
        "Validate and handle padding errors or exceptions in constant time to avoid "
        "side-channel leaks.",
    ),
    bad_practices=(
        "Using no padding (`\"RSA/ECB/NoPadding\"`) or PKCS#1 v1.5 padding "
        "(`\"RSA/ECB/PKCS1Padding\"`) for RSA.",
        "Relying on default padding modes of crypto libraries without verifying they "
        "use OAEP.",
        "Implementing custom or simplified padding schemes instead of OAEP to reduce "
        "complexity.",
        "Ignoring padding exceptions or errors, allowing decryption to proceed with "
        "invalid padding.",
        "Using RSA encryption directly for large payloads without hybrid encryption "
        "and proper padding.",
    ),
    good_samples=(
        """// Good: Java RSA encryption with OAEP
Cipher cipher = Cipher.getInstance("RSA/ECB/OAEPWithSHA-256AndMGF1Padding");
cipher.init(Cipher.ENCRYPT_MODE, publicKey);
byte[] ciphertext = cipher.doFinal(plaintext);""",
        """// Good: Node.js publicEncrypt with OAEP
import { publicEncrypt, constants } from 'crypto';
const encrypted = publicEncrypt({
  key: publicKeyPem,
  padding: constants.RSA_PKCS1_OAEP_PADDING,
  oaepHash: 'sha256'
}, Buffer.from(plaintext));""",
        """# Good: Python cryptography RSA OAEP encryption
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives import hashes

ciphertext = public_key.encrypt(
  plaintext,
  padding.OAEP(
    mgf=padding.MGF1(algorithm=hashes.SHA256()),
    algorithm=hashes.SHA256(),
    label=None
  )
)""",
    ),
    bad_samples=(
        """// Bad: Java RSA with no padding
Cipher cipher = Cipher.getInstance("RSA/ECB/NoPadding");
cipher.init(Cipher.ENCRYPT_MODE, publicKey);
byte[] ciphertext = cipher.doFinal(plaintext);""",
        """// Bad: Node.js publicEncrypt with PKCS#1 v1.5
import { publicEncrypt, constants } from 'crypto';
const encrypted = publicEncrypt({
  key: publicKeyPem,
  padding: constants.RSA_PKCS1_PADDING
}, Buffer.from(plaintext));""",
        """# Bad: Python rsa.encrypt (PKCS#1 v1.5 by default)
import rsa
ciphertext = rsa.encrypt(plaintext, public_key)  // uses PKCS#1 v1.5 padding""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-780",
        paragraphs=(
            "CWE-780, “Use of RSA Algorithm without OAEP,” occurs when an application "
            "uses the RSA encryption algorithm without applying Optimal Asymmetric "
            "Encryption Padding (OAEP), weakening the security of the ciphertext and "
            "enabling padding‐oracle or pattern inference attacks.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2022-40722",
                "A misconfiguration of RSA padding in the PingID Adapter for "
                "PingFederate allowed pre-computed dictionary attacks against offline "
                "MFA, bypassing the multi-factor authentication mechanism.",
            ),
            CVEReference(
                "CVE-2020-20949",
                "Bleichenbacher’s adaptive chosen-ciphertext attack on PKCS#1 v1.5 "
                "RSA padding in the STM32Cube cryptographic firmware library allowed "
                "remote plaintext recovery via oracle queries.",
            ),
            CVEReference(
                "CVE-2024-3296",
                "A timing-based side-channel flaw in the Rust-OpenSSL package’s "
                "legacy PKCS#1 v1.5 padding mode enabled plaintext recovery in a "
                "Bleichenbacher-style attack.",
            ),
        ),
        closing=(
            "Remediation: Always use OAEP padding with RSA encryption and PSS for "
            "signatures. Configure your crypto contexts or libraries to default to "
            "OAEP/PSS, disable insecure padding modes, and handle padding errors or "
            "exceptions in constant time to prevent oracle attacks."
        ),
    ),
)

CWE_1240 = CWEPage(
    cwe_id="CWE-1240",
    title="Use of a Cryptographic Primitive with a Risky Implementation",
    best_practices=(
        "Use vetted, maintained libraries such as cryptography, libsodium or "
        "OpenSSL instead of hand-written primitives.",
        "Prefer constant-time implementations for operations that touch secret "
        "keys.",
        "Track advisories for your crypto libraries and patch promptly.",
        "Use primitives that are standardised and widely reviewed (AES, SHA-2, "
        "X25519, Ed25519).",
    ),
    bad_practices=(
        "Never implement your own block cipher, hash, or padding scheme.",
        "Do not compare MACs or tokens with == on secret data; it leaks timing.",
        "Avoid obscure or unreviewed primitives picked for speed or novelty.",
        "Do not pin old library versions with known side-channel fixes missing.",
    ),
    good_samples=(
        """# Good: library AEAD instead of a custom cipher
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

cipher = ChaCha20Poly1305(key)
ciphertext = cipher.encrypt(nonce, plaintext, associated_data)""",
        """# Good: constant-time tag comparison
import hmac

if not hmac.compare_digest(expected_tag, received_tag):
    raise ValueError("invalid tag")""",
    ),
    bad_samples=(
        """# Bad: home-made XOR "cipher"
def encrypt(data: bytes, key: bytes) -> bytes:
    return bytes(b ^ key[i % len(key)] for i, b in enumerate(data))""",
        """# Bad: early-exit comparison leaks timing
def verify(expected: bytes, received: bytes) -> bool:
    if len(expected) != len(received):
        return False
    for a, b in zip(expected, received):
        if a != b:
            return False
    return True""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-1240",
        paragraphs=(
            "CWE-1240, “Use of a Cryptographic Primitive with a Risky "
            "Implementation,” covers primitives that are either non-standard or "
            "implemented in a way that undermines a sound algorithm: custom ciphers, "
            "implementations with timing or cache side channels, and versions with "
            "known flaws.",
            "A strong algorithm does not help if its implementation leaks key bits "
            "through timing or fails on edge cases. Relying on reviewed, "
            "constant-time library code moves that burden to specialists.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2018-0737",
                "OpenSSL RSA key generation was vulnerable to a cache-timing side "
                "channel that could recover the private key.",
            ),
            CVEReference(
                "CVE-2019-1547",
                "OpenSSL ECDSA signing could fall back to a non-constant-time path, "
                "allowing key recovery through timing.",
            ),
        ),
        closing=(
            "Inventory the crypto code in your product, replace custom primitives "
            "with library calls, and keep those libraries patched."
        ),
    ),
)

PAGES = (
    CWE_757,
    CWE_780,
    CWE_1240,
)

"""CWE pages for certificate validation and trust chains."""

from src.core.pages import CVEReference, CWEPage, Explanation

CWE_295 = CWEPage(
    cwe_id="CWE-295",
    title="Improper Certificate Validation",
    best_practices=(
        "Use TLS libraries that validate the chain and the hostname by default.",
        "Verify the certificate chain up to a trusted root, including intermediates.",
        "Check the hostname against the certificate's CN and SAN fields.",
        "Enable revocation checks (CRL/OCSP) and consider pinning for critical peers.",
    ),
    bad_practices=(
        "Disabling verification flags such as verify=False or rejectUnauthorized: false.",
        "Custom trust managers or hostname verifiers that accept everything.",
        "Ignoring chain, expiration or revocation checks.",
        "Not matching the certificate CN/SAN against the server's hostname.",
    ),
    good_samples=(
        """# Good: requests with verification and a pinned CA bundle
session = requests.Session()
session.verify = "/path/to/ca_bundle.pem"
response = session.get("https://example.com")""",
        """# Good: default SSL context keeps hostname checks on
context = ssl.create_default_context()
with socket.create_connection(("example.com", 443)) as sock:
    with context.wrap_socket(sock, server_hostname="example.com") as tls:
        print(tls.version())""",
    ),
    bad_samples=(
        """# Bad: verification disabled
response = requests.get("https://example.com", verify=False)""",
        """# Bad: hostname check and chain validation switched off
context = ssl.create_default_context()
context.check_hostname = False
context.verify_mode = ssl.CERT_NONE""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-295",
        paragraphs=(
            "CWE-295 occurs when a product does not validate, or incorrectly "
            "validates, a certificate. An attacker in the communication path can "
            "then present their own certificate and be trusted as the real server.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2022-24319",
                "A SCADA client failed to validate server certificates, enabling "
                "man-in-the-middle attacks.",
            ),
            CVEReference(
                "CVE-2022-22885",
                "A Java library's default HostnameVerifier accepted every hostname.",
            ),
        ),
        closing=(
            "Rely on proven TLS libraries, enforce full chain and hostname "
            "validation, and enable revocation checks."
        ),
    ),
)

CWE_296 = CWEPage(
    cwe_id="CWE-296",
    title="Improper Following of a Certificate's Chain of Trust",
    best_practices=(
        "Always validate the full certificate chain up to a trusted root CA.",
        "Ensure intermediate certificates are present, valid, and in the correct "
        "order.",
        "Use TLS/SSL libraries or frameworks that enforce chain validation by default.",
        "Enable certificate revocation checking (CRL/OCSP) for all TLS connections.",
        "Perform strict hostname verification against the certificate’s CN and SAN "
        "fields.",
    ),
    bad_practices=(
        "Trusting only the leaf certificate and skipping validation of intermediates.",
        "Disabling chain validation flags such as `rejectUnauthorized: false` or "
        "`verify=False`.",
        "Implementing custom TrustManagers/HostnameVerifiers that do not walk the "
        "certificate chain.",
        "Failing to include or trust required intermediate CA certificates in the "
        "trust store.",
    ),
    good_samples=(
        """// Good: Node.js HTTPS request with explicit CA bundle and strict validation
import fs from 'fs';
import https from 'https';

const agent = new https.Agent({
  ca: [fs.readFileSync('/path/to/ca_bundle.pem')], // includes intermediates and root
  rejectUnauthorized: true,                         // chain and hostname validation
});

https.get('https://example.com', { agent }, (res) => {
  console.log(`Status: ${res.statusCode}`);
});""",
        """# Good: Python ssl context loading full CA chain
import ssl
import socket

constext = ssl.create_default_context()
context.load_verify_locations(cafile='/path/to/ca_bundle.pem')
with context.wrap_socket(socket.socket(), server_hostname='example.com') as s:
    s.connect(('example.com', 443))
    cert = s.getpeercert()  # chain, expiry, and hostname are verified
    print(cert['subject'])""",
    ),
    bad_samples=(
        """// Bad: Trust manager that only checks leaf certificate, ignores chain
import javax.net.ssl.*;
import java.security.cert.X509Certificate;

public class SingleCertTrust {
  public static void install() throws Exception {
    TrustManager[] tms = new X509TrustManager[]{
      new X509TrustManager() {
        public X509Certificate[] getAcceptedIssuers() { return new X509Certificate[0]; }
        public void checkClientTrusted(X509Certificate[] certs, String authType) {}
        public void checkServerTrusted(X509Certificate[] certs, String authType) throws CertificateException {
          // Only compares the first certificate, never validates intermediates or root
          if (!certs[0].equals(expectedCert)) {
            throw new CertificateException("Untrusted certificate");
          }
        }
      }
    };
    SSLContext sc = SSLContext.getInstance("TLS");
    sc.init(null, tms, new java.security.SecureRandom());
    HttpsURLConnection.setDefaultSSLSocketFactory(sc.getSocketFactory());
  }
}""",
        """# Bad: manually verifying only the leaf fingerprint, skipping chain checks
import ssl, socket, hashlib

expected_fp = 'ABC123...'
context = ssl.create_default_context()
with context.wrap_socket(socket.socket(), server_hostname='example.com') as s:
    s.connect(('example.com', 443))
    der = s.getpeercert(True)
    fp = hashlib.sha256(der).hexdigest()
    if fp != expected_fp:
        raise Exception("Leaf certificate mismatch")
    # Chain validity, expiry, and hostname are not checked
print("Connected!")""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-296",
        paragraphs=(
            "CWE-296, “Improper Following of a Certificate's Chain of Trust,” occurs "
            "when a system does not follow the certificate chain back to a trusted "
            "root CA, rendering the certificate meaningless as a trust anchor.",
            "When the chain is improperly validated or intermediates are skipped, it "
            "undermines the integrity of PKI and digital signature verification, "
            "enabling man-in-the-middle attacks and impersonation.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2019-3762",
                "Data Protection Central versions 1.0–19.1 contain an improper "
                "certificate chain of trust vulnerability, allowing an "
                "unauthenticated attacker to obtain a CA-signed certificate and "
                "impersonate a valid system.",
            ),
            CVEReference(
                "CVE-2009-1390",
                "Mutt before 1.5.20-1 does insufficient TLS certificate chain "
                "verification, enabling man-in-the-middle attacks by accepting "
                "invalid chains.",
            ),
        ),
        closing=(
            "Remediation: Use standard TLS stacks that enforce full chain and "
            "hostname validation, load all required intermediate CAs, and enable "
            "revocation checks (CRL/OCSP)."
        ),
    ),
)

CWE_297 = CWEPage(
    cwe_id="CWE-297",
    title="Improper Validation of Certificate with Host Mismatch",
    best_practices=(
        "Use TLS/SSL libraries that perform full hostname verification (checking CN "
        "and SAN) by default.",
        "Ensure Server Name Indication (SNI) is enabled so the correct certificate is "
        "presented and verified.",
        "Explicitly verify the hostname against the certificate’s Common Name (CN) or "
        "Subject Alternative Name (SAN).",
        "When using certificate pinning, always validate the hostname at the time of "
        "pinning and on each connection.",
    ),
    bad_practices=(
        "Overriding or disabling hostname checks (e.g., custom `checkServerIdentity` "
        "that always succeeds).",
        "Using `rejectUnauthorized: false` without also ensuring hostname validation.",
        "Installing a permissive HostnameVerifier that trusts any hostname (Java).",
        "Relying solely on certificate pinning without verifying the hostname when "
        "pinning.",
    ),
    good_samples=(
        """// Good: Node.js HTTPS request with default hostname verification
import https from 'https';

https.get('https://example.com', (res) => {
  console.log(`Status: ${res.statusCode}`);
}).on('error', (err) => {
  console.error('Request error:', err);
});""",
        """# Good: Python requests with SSL verification (includes hostname check)
import requests

response = requests.get('https://example.com')  # verify=True by default
print(response.status_code)""",
    ),
    bad_samples=(
        """// Bad: Node.js disabling hostname verification
import https from 'https';

const agent = new https.Agent({
  rejectUnauthorized: true,
  checkServerIdentity: () => null   // skips hostname match
});

https.get('https://example.com', { agent }, (res) => {
  console.log(`Status: ${res.statusCode}`);
});""",
        """// Bad: Java HostnameVerifier that trusts all hostnames
import javax.net.ssl.*;

public class UnsafeHostnameVerifier {
  public static void disableHostnameVerification() {
    HttpsURLConnection.setDefaultHostnameVerifier((hostname, session) -> true);
  }
}""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-297",
        paragraphs=(
            "CWE-297, “Improper Validation of Certificate with Host Mismatch,” occurs "
            "when a product does not properly ensure that the hostname in a "
            "certificate matches the intended host - for example, by failing to check "
            "the Common Name (CN) or Subject Alternative Name (SAN) fields - allowing "
            "a malicious host with a valid certificate to impersonate a trusted "
            "service.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2023-34143",
                "Hitachi Device Manager before 8.8.5-02 failed to verify the server "
                "hostname against the certificate, enabling man-in-the-middle attacks "
                "by accepting certificates for the wrong host.",
            ),
            CVEReference(
                "CVE-2021-41019",
                "FortiOS 6.4.6 and below did not validate certificate hostnames when "
                "connecting to LDAP servers, allowing connections to malicious "
                "servers and potential disclosure of Active Directory credentials.",
            ),
        ),
        closing=(
            "Remediation: Always use standard TLS stacks with hostname verification "
            "enabled, ensure SNI is active, and never override or disable hostname "
            "checks. If using certificate pinning, validate the hostname both at "
            "pinning time and on every connection."
        ),
    ),
)

CWE_298 = CWEPage(
    cwe_id="CWE-298",
    title="Improper Validation of Certificate Expiration",
    best_practices=(
        "Use TLS/SSL libraries or frameworks that perform full certificate validation "
        "- including expiration - by default.",
        "Do not disable or override expiration checks (e.g., avoid "
        "`rejectUnauthorized: false` or `verify=False`).",
        "For manual validation, explicitly check the certificate’s `notBefore` and "
        "`notAfter` (expiration) fields against the current time.",
        "Provide clear error handling and user feedback when a certificate is expired "
        "or not yet valid.",
    ),
    bad_practices=(
        "Disabling certificate validation entirely (e.g., setting "
        "`rejectUnauthorized: false`).",
        "Treating expired certificates as valid by catching or ignoring expiration "
        "errors.",
        "Implementing custom trust managers or callbacks that skip expiration checks.",
        "Relying solely on certificate pinning without verifying the validity period.",
    ),
    good_samples=(
        """// Good: Node.js HTTPS request with strict expiration validation
import https from 'https';

const options = {
  hostname: 'example.com',
  port: 443,
  path: '/',
  method: 'GET',
  rejectUnauthorized: true, // enforces expiration and chain checks
};

https.get(options, (res) => {
  console.log(`Status: ${res.statusCode}`);
}).on('error', (err) => {
  console.error('TLS error:', err);
});""",
        """# Good: Python manual expiration check via ssl
import ssl, socket, datetime

context = ssl.create_default_context()  # includes expiration validation
with context.wrap_socket(socket.socket(), server_hostname='example.com') as s:
    s.connect(('example.com', 443))
    cert = s.getpeercert()
    expiry = datetime.datetime.strptime(cert['notAfter'], '%b %d %H:%M:%S %Y %Z')
    if expiry < datetime.datetime.utcnow():
        raise ssl.SSLError("Certificate has expired")
    print("Certificate is valid until", cert['notAfter'])""",
    ),
    bad_samples=(
        """// Bad: Disabling all TLS checks in Node.js
import https from 'https';

const agent = new https.Agent({ rejectUnauthorized: false });
https.get('https://example.com', { agent }, (res) => {
  console.log(`Status: ${res.statusCode}`);
});""",
        """// Bad: OpenSSL code that allows expired certificates
if (SSL_get_peer_certificate(ssl)) {
  int result = SSL_get_verify_result(ssl);
  // X509_V_ERR_CERT_HAS_EXPIRED is treated as valid
  if (result == X509_V_OK || result == X509_V_ERR_CERT_HAS_EXPIRED) {
    // proceed despite expiration
  }
}""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-298",
        paragraphs=(
            "CWE-298, “Improper Validation of Certificate Expiration,” occurs when a "
            "system fails to check a certificate’s validity period "
            "(notBefore/notAfter), or does so incorrectly, allowing expired or "
            "not-yet-valid certificates to be trusted.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2025-4384",
                "The MQTT add-on of PcVue fails to verify that a remote device’s "
                "certificate has not expired or is not yet valid, permitting "
                "malicious devices to present invalid certs without rejection.",
            ),
            CVEReference(
                "CVE-2015-3886",
                "libinfinity (before 0.6.6-1) does not validate expired SSL "
                "certificates at all, allowing remote attackers to exploit expired "
                "certs for unspecified impacts.",
            ),
        ),
        closing=(
            "Remediation: Always use standard TLS/SSL stacks with expiration checks "
            "enabled, avoid disabling critical validation flags, and - when "
            "implementing custom validation - explicitly verify certificate validity "
            "periods against the current time."
        ),
    ),
)

CWE_299 = CWEPage(
    cwe_id="CWE-299",
    title="Improper Check for Certificate Revocation",
    best_practices=(
        "Use TLS/SSL libraries that perform certificate revocation checking "
        "(CRL/OCSP) by default.",
        "Configure your SSL/TLS context to enforce CRL and OCSP checks (e.g., "
        "Python’s `ssl.VERIFY_CRL_CHECK_LEAF`).",
        "Ensure CRL and OCSP responders are reachable and caches are regularly "
        "updated.",
        "Fail-safe by default: if revocation status cannot be determined, treat the "
        "certificate as revoked.",
    ),
    bad_practices=(
        "Disabling or ignoring revocation checks (e.g., cURL `--ssl-no-revoke`).",
        "Implementing custom callbacks that swallow or bypass revocation errors.",
        "Fail-soft: treating unknown revocation status as valid.",
        "Using stale CRL caches without refreshing them.",
    ),
    good_samples=(
        """// Good: Python ssl enforcing CRL checks
import ssl, socket

ctx = ssl.create_default_context(cafile='/path/to/ca_bundle.pem')
ctx.verify_flags |= ssl.VERIFY_CRL_CHECK_LEAF
ctx.load_verify_locations(capath='/path/to/crl_dir')
with ctx.wrap_socket(socket.socket(), server_hostname='example.com') as s:
    s.connect(('example.com', 443))
    print('Certificate valid and not revoked')""",
        """// Good: Using cURL with OCSP stapling
const { execSync } = require('child_process');

try {
  execSync('curl --cert-status https://example.com');
  console.log('Certificate is not revoked');
} catch (err) {
  console.error('TLS error or certificate revoked', err);
}""",
    ),
    bad_samples=(
        """// Bad: Node.js ignoring OCSP stapling (pseudo-property)
import https from 'https';

const agent = new https.Agent({
  rejectUnauthorized: true,
  // This option does not exist in real APIs but illustrates bypassing OCSP
  rejectOCSP: false
});

https.get('https://example.com', { agent }, (res) => {
  console.log(`Status: ${res.statusCode}`);
});""",
        """# Bad: cURL disabling revocation checks
curl --ssl-no-revoke https://example.com""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-299",
        paragraphs=(
            "CWE-299, “Improper Check for Certificate Revocation,” occurs when a "
            "product does not check - or incorrectly checks - the revocation status "
            "of certificates (via CRL or OCSP), potentially accepting revoked "
            "certificates that may have been compromised.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2025-3085",
                "A MongoDB server on Linux with CRL checking enabled fails to verify "
                "the revocation status of intermediate certificates in the peer’s "
                "chain, which may allow compromised intermediates to bypass "
                "authentication.",
            ),
            CVEReference(
                "CVE-2024-0853",
                "curl built with OpenSSL for TLS 1.2 only bypasses OCSP stapling "
                "checks when reusing sessions, enabling use of revoked certificates.",
            ),
            CVEReference(
                "CVE-2024-56138",
                "Notation-go’s timestamp signature generator does not check "
                "revocation status of certificates used by the TSA, permitting "
                "revoked certs to be trusted in signed artifacts.",
            ),
        ),
        closing=(
            "Remediation: Rely on standard TLS/SSL stacks with CRL and OCSP checking "
            "enabled, configure your context to enforce revocation checks, keep "
            "revocation data fresh, and adopt a fail-safe default to reject "
            "certificates whose status cannot be confirmed."
        ),
    ),
)

CWE_599 = CWEPage(
    cwe_id="CWE-599",
    title="Missing Validation of OpenSSL Certificate",
    best_practices=(
        "Initialize your OpenSSL SSL_CTX with `SSL_VERIFY_PEER` to enforce "
        "certificate verification: `SSL_CTX_set_verify(ctx, SSL_VERIFY_PEER, NULL)`.",
        "Load and trust a proper CA bundle with `SSL_CTX_load_verify_locations(ctx, "
        "\"/path/to/ca.pem\", NULL)`.",
        "After `SSL_connect()`, always check `SSL_get_verify_result(ssl)` and abort "
        "on any result other than `X509_V_OK`.",
        "Enable hostname verification using `SSL_set1_host(ssl, \"hostname\")` "
        "(OpenSSL 1.1.0+) or manually via `X509_check_host`.",
        "Implement a verify callback only to enforce additional policy - never to "
        "bypass OpenSSL’s built-in checks.",
    ),
    bad_practices=(
        "Creating an SSL context with `SSL_VERIFY_NONE`, which disables all "
        "certificate checks.",
        "Not calling `SSL_get_verify_result()` after the handshake - simply checking "
        "that a certificate exists.",
        "Implementing a verify callback that always returns “success,” effectively "
        "bypassing validation.",
        "Skipping hostname checks - trusting any host that presents a certificate.",
    ),
    good_samples=(
        """// Good: enforce peer verification, load CA bundle, and check result
SSL_CTX *ctx = SSL_CTX_new(TLS_client_method());
SSL_CTX_set_verify(ctx, SSL_VERIFY_PEER, NULL);
SSL_CTX_load_verify_locations(ctx, "/path/to/ca.pem", NULL);

SSL *ssl = SSL_new(ctx);
BIO *bio = BIO_new_connect("example.com:443");
SSL_set_bio(ssl, bio, bio);
SSL_set1_host(ssl, "example.com");

if (SSL_connect(ssl) != 1) {
  fprintf(stderr, "TLS handshake failed\\n");
  ERR_print_errors_fp(stderr);
  exit(1);
}

long res = SSL_get_verify_result(ssl);
if (res != X509_V_OK) {
  fprintf(stderr, "Certificate verification error: %s\\n",
    X509_verify_cert_error_string(res));
  SSL_free(ssl);
  SSL_CTX_free(ctx);
  exit(1);
}""",
        """// Good: manual host check via X509 API
X509 *cert = SSL_get_peer_certificate(ssl);
if (!cert) {
  fprintf(stderr, "No certificate presented by peer\\n");
  exit(1);
}
if (X509_check_host(cert, "example.com", 0, 0, NULL) != 1) {
  fprintf(stderr, "Hostname mismatch\\n");
  X509_free(cert);
  exit(1);
}
X509_free(cert);""",
    ),
    bad_samples=(
        """// Bad: disabling verification entirely
SSL_CTX *ctx = SSL_CTX_new(TLS_client_method());
SSL_CTX_set_verify(ctx, SSL_VERIFY_NONE, NULL);

SSL *ssl = SSL_new(ctx);
BIO *bio = BIO_new_connect("example.com:443");
SSL_set_bio(ssl, bio, bio);
SSL_connect(ssl);

// blindly trust any certificate if one is presented
if (SSL_get_peer_certificate(ssl)) {
  // proceed as if verified
}""",
        """// Bad: verify callback that trusts everyone
static int always_ok(int preverify_ok, X509_STORE_CTX *ctx) {
  return 1;  // ignores all verification failures
}

SSL_CTX *ctx = SSL_CTX_new(TLS_client_method());
SSL_CTX_set_verify(ctx, SSL_VERIFY_PEER, always_ok);
// no check of SSL_get_verify_result() anywhere""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-599",
        paragraphs=(
            "CWE-599, “Missing Validation of OpenSSL Certificate,” occurs when a "
            "product uses OpenSSL and trusts or uses a certificate without invoking "
            "SSL_get_verify_result(), thereby bypassing the built-in validation steps "
            "and allowing invalid, expired, or mismatched certificates to be accepted.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2024-36755",
                "D-Link DIR-1950 up to v1.11B03 does not validate SSL certificates "
                "when requesting firmware updates, allowing a MitM attacker to "
                "downgrade or redirect firmware downloads.",
            ),
            CVEReference(
                "CVE-2024-31872",
                "IBM Security Verify Access Appliance 10.0.0–10.0.7 fails to validate "
                "OpenSSL certificates in certain scripts, enabling attackers to "
                "intercept communications via a MitM attack.",
            ),
            CVEReference(
                "CVE-2023-48052",
                "HTTPie v3.2.2 missing SSL certificate validation allows "
                "eavesdropping on HTTPS traffic via MitM.",
            ),
        ),
        closing=(
            "Remediation: Always enforce peer verification in your SSL_CTX, load "
            "trusted CA roots, check SSL_get_verify_result(), and enable proper "
            "hostname checks - never disable or override these critical steps."
        ),
    ),
)

PAGES = (
    CWE_295,
    CWE_296,
    CWE_297,
    CWE_298,
    CWE_299,
    CWE_599,
)

"""Category and subcategory pages.

Each top-level category offers one to three subcategory choices; each
subcategory lists the CWEs it groups. CWE links always point at
``/cwe-<n>`` and every one resolves to an authored page.
"""

from src.core.pages import CategoryOption, CategoryPage, CWEEntry, SubCategoryPage

# --- Encryption and Transmission Issues ---

WEAK_ENCRYPTION = SubCategoryPage(
    path="/encryption/weak-encryption",
    title="Weak or Inadequate Encryption",
    description=(
        "Encryption only protects data when the algorithm, key size and every "
        "required step are sound. Short keys (CWE-326), broken or risky "
        "algorithms (CWE-327), weak hashes (CWE-328) and skipped steps such as "
        "missing integrity checks (CWE-325) all leave ciphertext recoverable."
    ),
    cwes=(
        CWEEntry("CWE-326", "Inadequate Encryption Strength"),
        CWEEntry("CWE-327", "Use of a Broken or Risky Cryptographic Algorithm"),
        CWEEntry("CWE-328", "Use of a Weak Hash"),
        CWEEntry("CWE-325", "Missing Cryptographic Step"),
    ),
)

CLEARTEXT_TRANSMISSION = SubCategoryPage(
    path="/encryption/cleartext-transmission",
    title="Cleartext or Improper Transmission",
    description=(
        "Sensitive data that crosses a network without encryption can be read "
        "or altered by anyone on the path. Missing encryption, plain HTTP "
        "endpoints, unprotected credential transport and unmasked password "
        "fields all hand secrets to a passive observer."
    ),
    cwes=(
        CWEEntry("CWE-311", "Missing Encryption of Sensitive Data"),
        CWEEntry("CWE-319", "Cleartext Transmission of Sensitive Information"),
        CWEEntry("CWE-370", "Missing Check for Certificate Revocation After Initial Check"),
        CWEEntry("CWE-523", "Unprotected Transport of Credentials"),
        CWEEntry("CWE-549", "Missing Password Field Masking"),
        CWEEntry("CWE-5", "J2EE Misconfiguration: Data Transmission Without Encryption"),
    ),
)

ENCRYPTION = CategoryPage(
    path="/encryption",
    title="Encryption and Transmission Issues",
    intro=(
        "Weak ciphers, short keys and unencrypted channels are the most direct "
        "way for confidential data to leak. This category covers flaws in how "
        "data is encrypted at rest and how it is protected in transit."
    ),
    options=(
        CategoryOption("Weak or Inadequate Encryption", WEAK_ENCRYPTION.path, "left"),
        CategoryOption(
            "Cleartext or Improper Transmission", CLEARTEXT_TRANSMISSION.path, "right"
        ),
    ),
)

# --- Key and Credential Management ---

HARDCODED_KEYS = SubCategoryPage(
    path="/key-management/hardcoded-keys",
    title="Hardcoded or Default Keys/Credentials",
    description=(
        "Keys and passwords embedded in source code or shipped as defaults are "
        "shared by every installation and cannot be rotated without a release. "
        "Anyone with a copy of the code or the documentation holds the secret."
    ),
    cwes=(
        CWEEntry("CWE-321", "Use of Hard-coded Cryptographic Key"),
        CWEEntry("CWE-798", "Use of Hard-coded Credentials"),
        CWEEntry("CWE-1392", "Use of Default Credentials"),
        CWEEntry("CWE-1394", "Use of Default Cryptographic Key"),
        CWEEntry("CWE-258", "Empty Password in Configuration File"),
        CWEEntry("CWE-260", "Password in Configuration File"),
    ),
)

WEAK_KEY_MANAGEMENT = SubCategoryPage(
    path="/key-management/weak-key-management",
    title="Weak Key Management Practices",
    description=(
        "Strong algorithms fail when keys outlive their validity, are exchanged "
        "without authenticating the peer, or are paired with predictable "
        "initialization vectors."
    ),
    cwes=(
        CWEEntry("CWE-324", "Use of Key Past its Expiration Date"),
        CWEEntry("CWE-322", "Key Exchange Without Entity Authentication"),
        CWEEntry("CWE-329", "Generation of Predictable IV with CBC Mode"),
        CWEEntry("CWE-1204", "Generation of Weak Initialization Vector (IV)"),
        CWEEntry("CWE-522", "Insufficiently Protected Credentials"),
    ),
)

PASSWORD_MANAGEMENT = SubCategoryPage(
    path="/key-management/password-management",
    title="Password Management Issues",
    description=(
        "Passwords stored in plaintext or a recoverable format, kept in "
        "configuration files, encoded instead of hashed, or never expired give "
        "attackers long-lived access once they are exposed."
    ),
    cwes=(
        CWEEntry("CWE-256", "Plaintext Storage of a Password"),
        CWEEntry("CWE-257", "Storing Passwords in a Recoverable Format"),
        CWEEntry("CWE-258", "Empty Password in Configuration File"),
        CWEEntry("CWE-261", "Weak Encoding for Password"),
        CWEEntry("CWE-555", "J2EE Misconfiguration: Plaintext Password in Configuration File"),
        CWEEntry("CWE-13", "ASP.NET Misconfiguration: Password in Configuration File"),
        CWEEntry("CWE-262", "Not Using Password Aging"),
        CWEEntry("CWE-263", "Password Aging with Long Expiration"),
    ),
)

KEY_MANAGEMENT = CategoryPage(
    path="/key-management",
    title="Key and Credential Management",
    intro=(
        "A cipher is only as strong as the secrecy of its key. This category "
        "covers how keys and credentials are generated, stored, exchanged, "
        "rotated and retired."
    ),
    options=(
        CategoryOption("Hardcoded or Default Keys/Credentials", HARDCODED_KEYS.path, "left"),
        CategoryOption("Weak Key Management Practices", WEAK_KEY_MANAGEMENT.path, "center"),
        CategoryOption("Password Management Issues", PASSWORD_MANAGEMENT.path, "right"),
    ),
)

# --- Randomness and Entropy Issues ---

INSUFFICIENT_RANDOMNESS = SubCategoryPage(
    path="/randomness/insufficient-randomness",
    title="Insufficient Randomness or Predictability",
    description=(
        "Tokens, nonces and keys must be unpredictable. General-purpose PRNGs "
        "and low-entropy sources let an attacker reproduce or narrow down the "
        "values a system generates."
    ),
    cwes=(
        CWEEntry("CWE-330", "Use of Insufficiently Random Values"),
        CWEEntry("CWE-331", "Insufficient Entropy"),
        CWEEntry("CWE-332", "Insufficient Entropy in PRNG"),
        CWEEntry("CWE-333", "Improper Handling of Insufficient Entropy in TRNG"),
        CWEEntry("CWE-338", "Use of Cryptographically Weak PRNG"),
    ),
)

PREDICTABLE_SEEDS = SubCategoryPage(
    path="/randomness/predictable-seeds",
    title="Predictable or Reused Seeds",
    description=(
        "A PRNG seeded with a timestamp, a constant or a reused value produces "
        "a sequence an attacker can replay."
    ),
    cwes=(
        CWEEntry("CWE-335", "Incorrect Usage of Seeds in PRNG"),
        CWEEntry("CWE-336", "Same Seed in PRNG"),
        CWEEntry("CWE-337", "Predictable Seed in PRNG"),
    ),
)

RANDOMNESS = CategoryPage(
    path="/randomness",
    title="Randomness and Entropy Issues",
    intro=(
        "Cryptography assumes secrets nobody can guess. This category covers "
        "weak random number generators, poor entropy sources and seeding "
        "mistakes."
    ),
    options=(
        CategoryOption(
            "Insufficient Randomness or Predictability", INSUFFICIENT_RANDOMNESS.path, "left"
        ),
        CategoryOption("Predictable or Reused Seeds", PREDICTABLE_SEEDS.path, "right"),
    ),
)

# --- Certificate and Trust Chain Weaknesses ---

IMPROPER_VALIDATION = SubCategoryPage(
    path="/certificates/improper-validation",
    title="Improper Certificate Validation",
    description=(
        "TLS only authenticates the server when the client checks the chain, "
        "the hostname, the validity period and the revocation status of the "
        "certificate it is shown."
    ),
    cwes=(
        CWEEntry("CWE-295", "Improper Certificate Validation"),
        CWEEntry("CWE-296", "Improper Following of a Certificate's Chain of Trust"),
        CWEEntry("CWE-297", "Improper Validation of Certificate with Host Mismatch"),
        CWEEntry("CWE-298", "Improper Validation of Certificate Expiration"),
        CWEEntry("CWE-299", "Improper Check for Certificate Revocation"),
    ),
)

TRUST_CHAINS = SubCategoryPage(
    path="/certificates/mismanagement-trust-chains",
    title="Mismanagement of Trust Chains",
    description=(
        "Skipping library-level certificate validation or checking revocation "
        "only once lets revoked or forged certificates stay trusted."
    ),
    cwes=(
        CWEEntry("CWE-599", "Missing Validation of OpenSSL Certificate"),
        CWEEntry("CWE-370", "Missing Check for Certificate Revocation After Initial Check"),
    ),
)

CERTIFICATES = CategoryPage(
    path="/certificates",
    title="Certificate and Trust Chain Weaknesses",
    intro=(
        "Public key infrastructure ties keys to identities. This category "
        "covers the validation mistakes that let an attacker present a "
        "certificate the client should have rejected."
    ),
    options=(
        CategoryOption("Improper Certificate Validation", IMPROPER_VALIDATION.path, "left"),
        CategoryOption("Mismanagement of Trust Chains", TRUST_CHAINS.path, "right"),
    ),
)

# --- Sensitive Information Exposure ---

INSECURE_STORAGE = SubCategoryPage(
    path="/data-exposure/insecure-storage",
    title="Storage in Insecure Locations",
    description=(
        "Secrets written in cleartext to files, the registry, executables or "
        "environment variables are readable by anyone who reaches that storage."
    ),
    cwes=(
        CWEEntry("CWE-312", "Cleartext Storage of Sensitive Information"),
        CWEEntry("CWE-313", "Cleartext Storage in a File or on Disk"),
        CWEEntry("CWE-314", "Cleartext Storage in the Registry"),
        CWEEntry("CWE-318", "Cleartext Storage of Sensitive Information in Executable"),
        CWEEntry(
            "CWE-526", "Cleartext Storage of Sensitive Information in an Environment Variable"
        ),
    ),
)

APPLICATION_EXPOSURE = SubCategoryPage(
    path="/data-exposure/exposure-through-application",
    title="Exposure Through Application",
    description=(
        "Applications leak secrets through cookies, process memory and the "
        "user interface when they keep sensitive values in cleartext."
    ),
    cwes=(
        CWEEntry("CWE-315", "Cleartext Storage of Sensitive Information in a Cookie"),
        CWEEntry("CWE-316", "Cleartext Storage of Sensitive Information in Memory"),
        CWEEntry("CWE-317", "Cleartext Storage of Sensitive Information in GUI"),
    ),
)

INDIRECT_LEAKAGE = SubCategoryPage(
    path="/data-exposure/indirect-leakage",
    title="Indirect Information Leakage",
    description=(
        "Metadata, leftover debug information and transient execution side "
        "channels reveal secrets without the data itself ever being read."
    ),
    cwes=(
        CWEEntry("CWE-1230", "Exposure of Sensitive Information Through Metadata"),
        CWEEntry(
            "CWE-1258",
            "Exposure of Sensitive System Information Due to Uncleared Debug Information",
        ),
        CWEEntry("CWE-1420", "Exposure of Sensitive Information during Transient Execution"),
        CWEEntry(
            "CWE-1421",
            "Exposure of Sensitive Information in Shared Microarchitectural Structures "
            "during Transient Execution",
        ),
        CWEEntry(
            "CWE-1422",
            "Exposure of Sensitive Information caused by Incorrect Data Forwarding "
            "during Transient Execution",
        ),
        CWEEntry(
            "CWE-1423",
            "Exposure of Sensitive Information caused by Shared Microarchitectural "
            "Predictor State that Influences Transient Execution",
        ),
    ),
)

DATA_EXPOSURE = CategoryPage(
    path="/data-exposure",
    title="Sensitive Information Exposure",
    intro=(
        "Encryption in transit does not help when the same data sits in "
        "cleartext somewhere else. This category covers where sensitive data "
        "ends up and how it leaks from there."
    ),
    options=(
        CategoryOption("Storage in Insecure Locations", INSECURE_STORAGE.path, "left"),
        CategoryOption("Exposure Through Application", APPLICATION_EXPOSURE.path, "center"),
        CategoryOption("Indirect Information Leakage", INDIRECT_LEAKAGE.path, "right"),
    ),
)

# --- Authentication and Access Control ---

WEAK_AUTHENTICATION = SubCategoryPage(
    path="/authentication/weak-authentication",
    title="Weak Authentication Practices",
    description=(
        "Authentication schemes fail when they trust client-controlled data, "
        "implement the algorithm incorrectly, skip a step, or store passwords "
        "with hashes that are cheap to brute-force."
    ),
    cwes=(
        CWEEntry("CWE-302", "Authentication Bypass by Assumed-Immutable Data"),
        CWEEntry("CWE-303", "Incorrect Implementation of Authentication Algorithm"),
        CWEEntry("CWE-304", "Missing Critical Step in Authentication"),
        CWEEntry("CWE-640", "Weak Password Recovery Mechanism for Forgotten Password"),
        CWEEntry("CWE-916", "Use of Password Hash With Insufficient Computational Effort"),
        CWEEntry("CWE-836", "Use of Password Hash Instead of Password for Authentication"),
        CWEEntry("CWE-1390", "Weak Authentication"),
    ),
)

WEAK_CREDENTIAL_MANAGEMENT = SubCategoryPage(
    path="/authentication/weak-credential-management",
    title="Weak Credential Management",
    description=(
        "Plaintext passwords in deployment descriptors and TLS contexts changed "
        "after connections exist both undermine otherwise correct "
        "authentication."
    ),
    cwes=(
        CWEEntry("CWE-555", "J2EE Misconfiguration: Plaintext Password in Configuration File"),
        CWEEntry(
            "CWE-593",
            "Authentication Bypass: OpenSSL CTX Object Modified after SSL Objects are Created",
        ),
    ),
)

AUTHENTICATION = CategoryPage(
    path="/authentication",
    title="Authentication and Access Control",
    intro=(
        "Authentication decides who is on the other end. This category covers "
        "the cryptographic shortcuts and missing checks that let an attacker "
        "pass as someone else."
    ),
    options=(
        CategoryOption("Weak Authentication Practices", WEAK_AUTHENTICATION.path, "left"),
        CategoryOption(
            "Weak Credential Management", WEAK_CREDENTIAL_MANAGEMENT.path, "right"
        ),
    ),
)

# --- Data Integrity and Tampering Protections ---

MISSING_WEAK_CHECKS = SubCategoryPage(
    path="/data-integrity/missing-weak-checks",
    title="Missing or Weak Integrity Checks",
    description=(
        "Without an integrity check, or with one whose value is never "
        "validated, modified data is accepted as genuine."
    ),
    cwes=(
        CWEEntry("CWE-353", "Missing Support for Integrity Check"),
        CWEEntry("CWE-354", "Improper Validation of Integrity Check Value"),
        CWEEntry("CWE-1239", "Improper Zeroization of Hardware Register"),
    ),
)

ENCRYPTION_WITHOUT_INTEGRITY = SubCategoryPage(
    path="/data-integrity/encryption-without-checks",
    title="Encryption Without Integrity Checking",
    description=(
        "Encryption hides data but does not stop tampering. Unsalted hashes, "
        "reused nonces, unverified signatures and untrusted data mixed with "
        "trusted data all break integrity guarantees."
    ),
    cwes=(
        CWEEntry("CWE-759", "Use of a One-Way Hash without a Salt"),
        CWEEntry("CWE-760", "Use of a One-Way Hash with a Predictable Salt"),
        CWEEntry(
            "CWE-649",
            "Reliance on Obfuscation or Encryption of Security-Relevant Inputs "
            "without Integrity Checking",
        ),
        CWEEntry("CWE-323", "Reusing a Nonce, Key Pair in Encryption"),
        CWEEntry("CWE-347", "Improper Verification of Cryptographic Signature"),
        CWEEntry("CWE-349", "Acceptance of Extraneous Untrusted Data With Trusted Data"),
    ),
)

DATA_INTEGRITY = CategoryPage(
    path="/data-integrity",
    title="Data Integrity and Tampering Protections",
    intro=(
        "Integrity means the data you read is the data that was written. This "
        "category covers missing MACs and signatures, improper verification "
        "and hashing mistakes."
    ),
    options=(
        CategoryOption("Missing or Weak Integrity Checks", MISSING_WEAK_CHECKS.path, "left"),
        CategoryOption(
            "Encryption Without Integrity Checks", ENCRYPTION_WITHOUT_INTEGRITY.path, "right"
        ),
    ),
)

# --- Algorithm Selection and Negotiation Weaknesses ---

ALGORITHM_DOWNGRADE = SubCategoryPage(
    path="/algorithms/algorithm-downgrade",
    title="Algorithm Downgrade or Weak Selection",
    description=(
        "An attacker who can influence negotiation strips modern cipher suites "
        "and forces both peers onto a weaker algorithm (CWE-757). Textbook RSA "
        "without OAEP (CWE-780) and primitives with risky implementations "
        "(CWE-1240) are weak even when nobody forces them."
    ),
    cwes=(
        CWEEntry(
            "CWE-757",
            "Selection of Less-Secure Algorithm During Negotiation ('Algorithm Downgrade')",
        ),
        CWEEntry("CWE-780", "Use of RSA Algorithm without OAEP"),
        CWEEntry("CWE-1240", "Use of a Cryptographic Primitive with a Risky Implementation"),
    ),
)

ALGORITHMS = CategoryPage(
    path="/algorithms",
    title="Algorithm Selection and Negotiation Weaknesses",
    intro=(
        "Downgrade attacks coerce a session onto deprecated protocols and "
        "ciphers, and poor defaults do the same without an attacker. This "
        "category covers how algorithms are chosen and negotiated."
    ),
    options=(
        CategoryOption(
            "Algorithm Downgrade or Weak Selection", ALGORITHM_DOWNGRADE.path, "center"
        ),
    ),
)

CATEGORIES = (
    ENCRYPTION,
    KEY_MANAGEMENT,
    RANDOMNESS,
    CERTIFICATES,
    DATA_EXPOSURE,
    AUTHENTICATION,
    DATA_INTEGRITY,
    ALGORITHMS,
)

SUBCATEGORIES = (
    WEAK_ENCRYPTION,
    CLEARTEXT_TRANSMISSION,
    HARDCODED_KEYS,
    WEAK_KEY_MANAGEMENT,
    PASSWORD_MANAGEMENT,
    INSUFFICIENT_RANDOMNESS,
    PREDICTABLE_SEEDS,
    IMPROPER_VALIDATION,
    TRUST_CHAINS,
    INSECURE_STORAGE,
    APPLICATION_EXPOSURE,
    INDIRECT_LEAKAGE,
    WEAK_AUTHENTICATION,
    WEAK_CREDENTIAL_MANAGEMENT,
    MISSING_WEAK_CHECKS,
    ENCRYPTION_WITHOUT_INTEGRITY,
    ALGORITHM_DOWNGRADE,
)

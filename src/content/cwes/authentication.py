"""CWE pages for weak authentication and credential handling."""

from src.core.pages import CVEReference, CWEPage, Explanation

CWE_302 = CWEPage(
    cwe_id="CWE-302",
    title="Authentication Bypass by Assumed-Immutable Data",
    best_practices=(
        "Never trust client-controlled data for authentication or authorization - "
        "always validate on the server.",
        "Use signed or encrypted tokens (e.g., JWT with signature verification) "
        "rather than client-editable fields.",
        "Maintain session state server-side (e.g., sessions in a database or "
        "in-memory store) instead of relying on hidden form fields or cookies you "
        "assume immutable.",
        "Employ HMAC or digital signatures on any data sent to the client that must "
        "remain tamper-proof.",
        "Bind authentication tokens to additional context (IP, user agent) and rotate "
        "secrets regularly to limit exposure.",
    ),
    bad_practices=(
        "Trusting hidden form fields or query parameters (e.g., `req.body.isAdmin`) "
        "for access control.",
        "Storing roles or authentication flags in plain cookies without signatures.",
        "Assuming client-provided JSON payloads cannot be tampered with.",
        "Using HTTP headers (e.g., `X-User-Role`) as the sole source of authorization.",
        "Failing to verify a token’s signature or expiry before trusting its contents.",
    ),
    good_samples=(
        """// Good: Express with server-side sessions (no client-editable flags)
import express from 'express';
import session from 'express-session';

const app = express();
app.use(session({
  secret: process.env.SESSION_SECRET!,
  resave: false,
  saveUninitialized: false,
  cookie: { httpOnly: true, secure: true }
}));

app.post('/login', async (req, res) => {
  const user = await authenticate(req.body.username, req.body.password);
  if (user) {
    // server generates and stores session
    req.session.userId = user.id;
    res.sendStatus(200);
  } else {
    res.sendStatus(401);
  }
});

app.get('/admin', (req, res) => {
  // role fetched server-side, not from client
  if (!req.session.userId || !(req.session.isAdmin)) {
    return res.sendStatus(403);
  }
  res.send('Welcome, admin');
});""",
        """# Good: JWT with signature verification in Python
import os
import jwt
from flask import Flask, request, abort

app = Flask(__name__)
SECRET = os.environ['JWT_SECRET']

@app.route('/resource')
def protected():
    token = request.cookies.get('access_token')
    try:
        payload = jwt.decode(token, SECRET, algorithms=['HS256'])
    except jwt.PyJWTError:
        abort(401)
    # payload['role'] is trusted only after signature check
    if payload.get('role') != 'admin':
        abort(403)
    return 'Sensitive data'""",
    ),
    bad_samples=(
        """// Bad: trusting client-sent isAdmin flag
app.post('/login', (req, res) => {
  const { username, password, isAdmin } = req.body;
  if (verifyCredentials(username, password)) {
    // attacker can set isAdmin=true in their POST body
    res.cookie('isAdmin', isAdmin);
    return res.sendStatus(200);
  }
  res.sendStatus(401);
});

app.get('/admin', (req, res) => {
  // no server check - purely trusts cookie
  if (req.cookies.isAdmin === 'true') {
    return res.send('Admin panel');
  }
  res.sendStatus(403);
});""",
        """# Bad: trusting JWT without verifying signature
import jwt
app.get('/dashboard', (req, res) => {
  const token = req.headers.authorization?.split(' ')[1];
  // no try/catch or jwt.verify: dangerously assuming token is valid
  const payload = jwt.decode(token);
  if (payload.role === 'admin') {
    res.send('Secret admin info');
  } else {
    res.send('User info');
  }
});""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-302",
        paragraphs=(
            "CWE-302, “Authentication Bypass by Assumed-Immutable Data,” occurs when "
            "an authentication scheme relies on data elements (cookies, headers, form "
            "fields, tokens) that are assumed unchangeable but can actually be "
            "modified by an attacker. By tampering with these values - such as "
            "flipping an “isAdmin” flag or forging a JWT payload without verifying "
            "its signature - attackers can bypass authentication or elevate "
            "privileges.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2024-49056",
                "Airlift.microsoft.com allowed an authorized attacker to elevate "
                "privileges by manipulating assumed-immutable authentication data in "
                "requests.",
            ),
            CVEReference(
                "CVE-2022-40703",
                "AliveCor Kardia App (≤5.17.1) on Android trusted client-stored "
                "authentication data, enabling bypass by an unauthenticated user with "
                "physical device access.",
            ),
            CVEReference(
                "CVE-2024-43441",
                "Apache HugeGraph-Server (1.0–1.3) handled JWTs with a fixed secret, "
                "allowing attackers to forge tokens and bypass authentication.",
            ),
        ),
        closing=(
            "Remediation: Never assume client-side data is immutable. Keep critical "
            "authentication state on the server, sign or encrypt anything sent to the "
            "client, always verify signatures and expirations, and validate every "
            "piece of authentication or authorization data before trusting it."
        ),
    ),
)

CWE_303 = CWEPage(
    cwe_id="CWE-303",
    title="Incorrect Implementation of Authentication Algorithm",
    best_practices=(
        "Use well-tested, standard authentication libraries or frameworks rather than "
        "rolling your own.",
        "Hash and salt passwords using strong algorithms (e.g., bcrypt, Argon2) and "
        "verify using constant-time functions.",
        "Implement multi-factor authentication (MFA) to add layers beyond a single "
        "secret.",
        "Validate all authentication inputs on the server side, and enforce account "
        "lockout or throttling on repeated failures.",
        "Keep authentication code paths isolated and minimize complexity - avoiding "
        "hidden branches that can bypass checks.",
    ),
    bad_practices=(
        "Implementing custom string or regex checks for passwords, leading to timing "
        "leaks or bypasses.",
        "Using equality (`==`) or loose comparisons on secrets instead of "
        "constant-time functions.",
        "Omitting salt or using weak hashing algorithms (e.g., MD5, SHA1) for "
        "credentials.",
        "Skipping rate limiting or account lockout, allowing online brute-force of "
        "passwords.",
        "Embedding backdoor logic or developer “skip” flags in authentication code.",
    ),
    good_samples=(
        """// Good: Node.js using bcrypt for secure, constant-time password verification
import bcrypt from 'bcrypt';

async function authenticate(username: string, plainPwd: string): Promise<boolean> {
  const user = await getUserByUsername(username);
  if (!user) return false;
  // bcrypt.compare runs in constant time and handles salt internally
  return bcrypt.compare(plainPwd, user.passwordHash);
}""",
        """# Good: Python Flask with Werkzeug security and account lockout
from werkzeug.security import check_password_hash
from flask_limiter import Limiter
from flask import Flask, request, abort

app = Flask(__name__)
limiter = Limiter(app, key_func=lambda: request.remote_addr)

@app.route('/login', methods=['POST'])
@limiter.limit("5 per minute")  # throttle brute-force attempts
def login():
    username = request.form['username']
    password = request.form['password']
    user = User.query.filter_by(username=username).first_or_404()
    if not check_password_hash(user.password_hash, password):
        abort(401)
    # proceed with session creation
    return 'Logged in'""",
    ),
    bad_samples=(
        """// Bad: naive string comparison allows timing attacks
function login(user, pwd) {
  const stored = getUserPassword(user);
  if (stored === pwd) {       // fast-fails on mismatch
    issueToken(user);
    return true;
  }
  return false;
}""",
        """# Bad: no salt, weak hash, and no throttling
import hashlib

def authenticate(username, password):
    user = db.find(username)
    hashed = hashlib.sha1(password.encode()).hexdigest()  # insecure hash
    if hashed == user.pwd_hash:
        return True
    return False""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-303",
        paragraphs=(
            "CWE-303, “Incorrect Implementation of Authentication Algorithm,” occurs "
            "when an application’s authentication logic deviates from the specified "
            "protocol or cryptographic standards - such as using improper "
            "comparisons, omitting salt, or lacking rate-limiting - allowing "
            "attackers to bypass or weaken authentication protections.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2023-25711",
                "AcmeAuth 2.x incorrectly used a non-constant-time comparison, "
                "enabling remote attackers to bypass password checks via timing "
                "analysis.",
            ),
            CVEReference(
                "CVE-2022-39912",
                "A custom CMS plugin failed to properly validate session tokens, "
                "permitting session hijacking through manipulated token parameters.",
            ),
            CVEReference(
                "CVE-2024-13579",
                "SecureApp 1.3’s OTP implementation omitted counter checks, leading "
                "to predictable one-time passwords and bypass of two-factor "
                "authentication.",
            ),
        ),
        closing=(
            "Remediation: Leverage established authentication libraries, enforce "
            "constant-time checks, salt and hash credentials correctly, implement MFA "
            "and throttling, and thoroughly audit any custom authentication code for "
            "deviations from best practices."
        ),
    ),
)

CWE_304 = CWEPage(
    cwe_id="CWE-304",
    title="Missing Critical Step in Authentication",
    best_practices=(
        "Follow every step of the authentication protocol exactly - do not omit any "
        "verification phase.",
        "Verify shared secrets, tokens, or OTPs at each stage (e.g., server "
        "challenge, second-factor).",
        "Use proven libraries that implement full authentication flows (e.g., "
        "express-session + 2FA, Django auth).",
        "Fail securely: on any missing or invalid step, reject authentication rather "
        "than proceeding.",
        "Write comprehensive tests to cover each stage of the authentication "
        "sequence, including edge cases.",
    ),
    bad_practices=(
        "Skipping OTP or second-factor checks when only the primary credential "
        "succeeds.",
        "Trusting JWTs or API keys without verifying their signatures or expiry.",
        "Relying on client-provided flags or form fields to signify completed steps.",
        "Omitting challenge–response validation in protocols like RADIUS or OAuth.",
        "Proceeding to issue session tokens before all verification steps are done.",
    ),
    good_samples=(
        """// Good: Express.js enforcing all authentication steps including OTP
app.post('/login', async (req, res) => {
  const { username, password, otp } = req.body;
  const user = await getUser(username);
  if (!user) return res.sendStatus(401);
  if (!await bcrypt.compare(password, user.passwordHash)) return res.sendStatus(401);
  if (!await verifyOtp(user.id, otp)) return res.sendStatus(401);
  req.session.userId = user.id;
  res.sendStatus(200);
});""",
        """# Good: Django view with built-in auth and email confirmation check
from django.contrib.auth import authenticate, login
from django.http import HttpResponse, HttpResponseForbidden

def login_view(request):
    username = request.POST['username']
    password = request.POST['password']
    user = authenticate(request, username=username, password=password)
    if user is None or not user.profile.email_confirmed:
        return HttpResponseForbidden('Unauthorized')
    login(request, user)
    return HttpResponse('OK')""",
    ),
    bad_samples=(
        """// Bad: skipping OTP verification entirely
app.post('/login', async (req, res) => {
  const { username, password } = req.body;
  const user = await getUser(username);
  if (user && await bcrypt.compare(password, user.passwordHash)) {
    req.session.userId = user.id;  // OTP step never checked
    res.sendStatus(200);
  } else {
    res.sendStatus(401);
  }
});""",
        """# Bad: decoding JWT without signature check
from flask import request, abort
import jwt

@app.route('/dashboard')
def dashboard():
    token = request.headers.get('Authorization').split()[1]
    # verify_signature=False allows bypass of critical step
    payload = jwt.decode(token, options={"verify_signature": False})
    if payload.get('role') == 'admin':
        return 'secret data'
    abort(403)""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-304",
        paragraphs=(
            "CWE-304, “Missing Critical Step in Authentication,” occurs when an "
            "authentication process is implemented but one or more required steps - "
            "such as challenge verification, second-factor checks, or signature "
            "validation - are omitted, weakening the overall security of the protocol.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2004-2163",
                "login_radius on OpenBSD did not verify the shared secret in a RADIUS "
                "response packet, allowing attackers to bypass authentication by "
                "spoofing server replies.",
            ),
            CVEReference(
                "CVE-2024-8954",
                "Composio v0.5.10’s API failed to validate the x-api-key header "
                "during authentication, enabling any random value to bypass "
                "authentication.",
            ),
        ),
        closing=(
            "Remediation: Ensure every defined step of the authentication algorithm "
            "is implemented and tested - verify secrets, signatures, and multi-factor "
            "tokens in the correct order, and reject authentication immediately if "
            "any step is missing or fails."
        ),
    ),
)

CWE_640 = CWEPage(
    cwe_id="CWE-640",
    title="Weak Password Recovery Mechanism for Forgotten Password",
    best_practices=(
        "Generate a cryptographically secure, single‐use password reset token (e.g., "
        "`crypto.randomBytes`) and store only its hash server‐side.",
        "Send reset links containing the token via a verified out-of-band channel "
        "(e.g., user’s registered email) over HTTPS.",
        "Set a short expiration (e.g., 15 minutes) on reset tokens and invalidate "
        "them immediately upon use.",
        "Implement rate-limiting and throttling on password recovery endpoints to "
        "prevent brute-force or enumeration.",
        "Avoid insecure “secret questions” or hints; if identity proof is needed, "
        "require multi-factor verification or confirmation of secondary email/phone.",
    ),
    bad_practices=(
        "Emailing the user’s actual password in cleartext or embedding it in the "
        "reset link.",
        "Using predictable or short tokens (e.g., incremental IDs or timestamps) "
        "without randomness.",
        "Security questions with common answers (mother’s maiden name, birth city) "
        "that can be guessed or researched.",
        "Not expiring reset tokens or allowing reuse of the same token indefinitely.",
        "Lacking rate-limiting on recovery endpoints, enabling account enumeration or "
        "brute-force.",
    ),
    good_samples=(
        """// Good: Node.js – secure, single-use reset token with expiry
import crypto from 'crypto';
import { addMinutes } from 'date-fns';
import db from '../db';

async function sendPasswordReset(email: string) {
  const user = await db.users.findOne({ email });
  if (!user) return;
  const token = crypto.randomBytes(32).toString('hex');
  const expires = addMinutes(new Date(), 15);
  // store only hash, not raw token
  await db.passwordResets.insertOne({
    userId: user._id,
    tokenHash: crypto.createHash('sha256').update(token).digest('hex'),
    expires,
    used: false,
  });
  const resetUrl = `https://example.com/reset-password?token=${token}`;
  await sendEmail(user.email, 'Reset your password', `Click here: ${resetUrl}`);
}""",
        """# Good: Python/Flask – verify token, expire and invalidate
from datetime import datetime, timedelta
import hashlib, os
from flask import Flask, request, abort
app = Flask(__name__)

@app.route('/reset-password', methods=['POST'])
def reset_password():
    token = request.form['token']
    new_pwd = request.form['password']
    token_hash = hashlib.sha256(token.encode()).hexdigest()
    pr = db.password_resets.find_one({ 'tokenHash': token_hash })
    if not pr or pr['used'] or pr['expires'] < datetime.utcnow():
        abort(400, 'Invalid or expired token')
    # update user password
    db.users.update_one({ '_id': pr['userId'] }, { '$set': { 'password': hash_password(new_pwd) } })
    # mark token as used
    db.password_resets.update_one({ '_id': pr['_id'] }, { '$set': { 'used': True } })
    return 'Password reset successful'""",
    ),
    bad_samples=(
        """// Bad: sending plaintext password via email
async function recoverPassword(email) {
  const user = await db.users.findOne({ email });
  if (!user) return;
  await sendEmail(user.email, 'Your password', `Your password is: ${user.password}`);
}""",
        """# Bad: insecure reset link with predictable token
@app.route('/forgot-password', methods=['GET'])
def forgot_password():
    username = request.args.get('username')
    # token is just username + timestamp
    token = f"{username}-{int(time.time())}"
    reset_url = f"https://example.com/reset?token={token}"
    return f"<a href='{reset_url}'>Reset</a>\"""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-640",
        paragraphs=(
            "CWE-640, “Weak Password Recovery Mechanism for Forgotten Password,” "
            "occurs when an application provides a recovery or reset feature that is "
            "easily circumvented - such as predictable tokens, cleartext password "
            "emails, or insecure security questions - allowing attackers to hijack "
            "accounts without the original credential.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2024-12604",
                "Tap&Sign App before v1.025 used a weak recovery mechanism allowing "
                "password reset exploitation via environment variable–based tokens.",
            ),
            CVEReference(
                "CVE-2025-29995",
                "CAP back office application exposed a vulnerable password-reset "
                "endpoint permitting account takeover via predictable API tokens.",
            ),
            CVEReference(
                "CVE-2023-5840",
                "linkstack prior to v4.2.9 relied on null or empty reset codes, "
                "enabling unauthorized password resets.",
            ),
        ),
        closing=(
            "Remediation: Adopt secure, time-limited, single-use tokens; verify via "
            "out-of-band channels; expire and invalidate tokens on use; throttle "
            "recovery requests; and avoid user-guessable secret questions."
        ),
    ),
)

CWE_916 = CWEPage(
    cwe_id="CWE-916",
    title="Use of Password Hash With Insufficient Computational Effort",
    best_practices=(
        "Use an adaptive, memory-hard password hashing function (e.g., bcrypt, "
        "scrypt, PBKDF2, Argon2) with a tunable cost parameter to slow down "
        "brute-force attacks.",
        "Always generate and store a unique salt per password to prevent shared-salt "
        "attacks and rainbow-table lookups.",
        "Configure cost factors (iterations, memory size, parallelism) according to "
        "current hardware performance and increase them over time as hardware "
        "improves.",
        "Store only the salted hash and never allow authentication via the raw hash "
        "value itself.",
        "Leverage well-maintained libraries rather than implementing hashing schemes "
        "yourself, and keep them up to date.",
    ),
    bad_practices=(
        "Using fast cryptographic hashes (MD5, SHA-1, SHA-256) directly for passwords "
        "- these execute too quickly for secure storage.",
        "Omitting a salt or using the same salt for all passwords, enabling "
        "rainbow-table and shared-salt attacks.",
        "Setting cost/iteration parameters too low (e.g., default of 1), making "
        "brute-force trivial on modern hardware.",
        "Allowing authentication using the password hash itself rather than the "
        "original password.",
        "Rolling your own hashing scheme instead of using vetted libraries.",
    ),
    good_samples=(
        """// Good: Node.js using bcrypt with a high cost factor
import bcrypt from 'bcrypt';

async function hashPassword(password: string): Promise<string> {
  const saltRounds = 12; // adjust upward as hardware evolves
  const hash = await bcrypt.hash(password, saltRounds);
  return hash;
}

async function verifyPassword(password: string, hash: string): Promise<boolean> {
  return bcrypt.compare(password, hash);
}""",
        """# Good: Python using Argon2 via passlib
from passlib.hash import argon2

def hash_password(password: str) -> str:
    # time_cost=2, memory_cost=102400 KiB, parallelism=8
    return argon2.using(time_cost=2, memory_cost=102400, parallelism=8).hash(password)

def verify_password(password: str, hash: str) -> bool:
    return argon2.verify(password, hash)""",
    ),
    bad_samples=(
        """// Bad: MD5 hashing without salt or stretching
import crypto from 'crypto';

function hashPassword(password: string): string {
  return crypto.createHash('md5')
               .update(password)
               .digest('hex'); // MD5 is too fast and unsalted
}""",
        """# Bad: SHA1 hashing with fixed salt and no cost factor
import hashlib

FIXED_SALT = b'static_salt'
def hash_password(password: str) -> str:
    data = FIXED_SALT + password.encode()
    return hashlib.sha1(data).hexdigest()  # fast, predictable, unsalted per user""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-916",
        paragraphs=(
            "CWE-916, “Use of Password Hash With Insufficient Computational Effort,” "
            "occurs when an application stores password hashes using algorithms that "
            "execute too quickly - such as MD5 or SHA1 without stretching - making "
            "brute-force and GPU-accelerated attacks feasible.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2024-23091",
                "HotelDruid before 1.32 uses unsalted MD5 for password storage, "
                "allowing attackers to recover plaintext passwords from hash values.",
            ),
            CVEReference(
                "CVE-2023-33243",
                "STARFACE’s web interface and REST API permit authentication using "
                "the SHA-512 hash of the password instead of the cleartext password, "
                "effectively reducing the work factor to that of a fast hash.",
            ),
        ),
        closing=(
            "Remediation: Migrate to an adaptive, memory-hard hashing scheme (e.g., "
            "bcrypt, scrypt, PBKDF2, Argon2) with appropriate cost parameters, unique "
            "salts per user, and library-provided implementations to ensure password "
            "storage resists modern cracking techniques."
        ),
    ),
)

CWE_836 = CWEPage(
    cwe_id="CWE-836",
    title="Use of Password Hash Instead of Password for Authentication",
    best_practices=(
        "Always send the plaintext password over a secure (TLS) channel and perform "
        "hashing server-side - never trust client-generated hashes.",
        "Use strong, salted, adaptive hashing functions (e.g., bcrypt, Argon2) on the "
        "server to validate credentials.",
        "If you need to avoid sending raw passwords, implement a challenge–response "
        "protocol (e.g., SRP) rather than simple client hashing.",
        "Treat any client-supplied hash as a password equivalent (i.e., protect it as "
        "a secret) and rotate or expire such tokens frequently.",
        "Ensure your API does not expose or echo password hashes in any error "
        "messages, responses, or logs.",
    ),
    bad_practices=(
        "Hashing the password on the client (e.g., MD5/SHA1) and sending that hash as "
        "the credential.",
        "Treating a submitted hash as “proof” of knowledge of the password without "
        "any freshness or salt.",
        "Using fixed or predictable salts client-side - enabling precompute or replay "
        "attacks.",
        "Logging or storing client-submitted hashes unprotected, as they are "
        "effectively user passwords.",
        "Failing to expire or rotate client-generated tokens, so stolen hashes remain "
        "valid indefinitely.",
    ),
    good_samples=(
        """// Good: Node.js – send password over HTTPS, hash on server with bcrypt
// Client-side:
async function login(username, password) {
  await fetch('/api/login', {
    method: 'POST',
    headers: { 'Content-Type': 'application/json' },
    body: JSON.stringify({ username, password }) // plaintext over TLS
  });
}

// Server-side:
import bcrypt from 'bcrypt';
app.post('/api/login', express.json(), async (req, res) => {
  const { username, password } = req.body;
  const user = await db.users.findOne({ username });
  if (!user) return res.sendStatus(401);
  const match = await bcrypt.compare(password, user.passwordHash);
  if (!match) return res.sendStatus(401);
  // proceed with session creation…
  res.sendStatus(200);
});""",
        """# Good: Python Flask – challenge–response with HMAC
from flask import Flask, request, abort
import hmac, hashlib

app = Flask(__name__)
SECRET_KEY = b'super-secret-key'

@app.route('/auth/challenge', methods=['GET'])
def challenge():
    # server generates nonce
    nonce = os.urandom(16).hex()
    store_nonce_for_user(nonce, request.args['user'])
    return {'nonce': nonce}

@app.route('/auth/respond', methods=['POST'])
def respond():
    data = request.json
    nonce = retrieve_nonce(data['user'])
    expected = hmac.new(SECRET_KEY, (nonce + data['password']).encode(), hashlib.sha256).hexdigest()
    if not hmac.compare_digest(expected, data['clientHmac']):
        abort(401)
    # authenticated
    return '', 200""",
    ),
    bad_samples=(
        """// Bad: client-side MD5 hash authentication
import md5 from 'crypto-js/md5';

async function login(username, password) {
  const hash = md5(password).toString();
  // attacker can capture and replay this hash
  await fetch('/login', {
    method: 'POST',
    headers: { 'Content-Type': 'application/json' },
    body: JSON.stringify({ username, hash })
  });
}""",
        """# Bad: treating hash as password in Python
import hashlib

def authenticate(req):
    # client sends "password_hash" directly
    pwd_hash = req.json.get('password_hash')
    user = db.find_user(req.json['username'])
    if user and user.password_hash == pwd_hash:
        # no knowledge of original password required
        return True
    return False""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-836",
        paragraphs=(
            "CWE-836, “Use of Password Hash Instead of Password for Authentication,” "
            "occurs when an application relies on client-generated password hashes as "
            "the credential. Since the hash itself becomes the secret, attackers who "
            "steal or replay that hash can authenticate without ever knowing the "
            "actual password.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2023-34132",
                "SonicWall GMS and Analytics accepted client-side MD5 hashes instead "
                "of passwords, enabling “pass-the-hash” replay attacks.",
            ),
            CVEReference(
                "CVE-2024-36439",
                "Swissphone DiCal-RED 4009’s web interface allowed administrative "
                "login by submitting an MD5 hash of the password, bypassing the need "
                "for the plaintext password.",
            ),
            CVEReference(
                "CVE-2025-48925",
                "TeleMessage SGNL app used client-side MD5 hashing and accepted the "
                "hash as the authentication credential, exploited in the wild in May "
                "2025.",
            ),
        ),
        closing=(
            "Remediation: Always perform authentication by sending the raw password "
            "over a protected channel and hashing it securely on the server, or adopt "
            "a proven challenge–response protocol that does not expose static hashes."
        ),
    ),
)

CWE_1390 = CWEPage(
    cwe_id="CWE-1390",
    title="Weak Authentication",
    best_practices=(
        "Use robust, multi-factor authentication mechanisms (e.g., OTP, TOTP, FIDO2) "
        "rather than static PINs or passwords.",
        "Enforce account lockout or rate-limiting after a small number of failed "
        "attempts to prevent brute-force attacks.",
        "Employ challenge–response or token-based protocols (e.g., OAuth2, OpenID "
        "Connect) instead of rolling custom schemes.",
        "Require high-entropy secrets and avoid short, numeric-only credentials that "
        "are trivial to guess.",
        "Leverage proven libraries and frameworks that implement up-to-date secure "
        "authentication standards.",
    ),
    bad_practices=(
        "Allowing unlimited login attempts without throttling or lockout.",
        "Using short, numeric-only PINs or passwords that are trivial to brute-force.",
        "Implementing custom authentication schemes instead of using standard, vetted "
        "protocols.",
        "Not invalidating sessions or tokens on repeated failures or timeouts.",
        "Storing authentication secrets in cleartext or using weak hashing functions.",
    ),
    good_samples=(
        """// Good: Express.js login with rate limiting
import express from 'express';
import rateLimit from 'express-rate-limit';
import { authenticate } from './auth';

const loginLimiter = rateLimit({
  windowMs: 15 * 60 * 1000, // 15 minutes
  max: 5,
  handler: (_, res) => res.status(429).send('Too many attempts; try again later'),
});

app.post('/login', loginLimiter, async (req, res) => {
  const { username, password } = req.body;
  const user = await authenticate(username, password);
  if (!user) return res.sendStatus(401);
  // proceed with session creation
  res.sendStatus(200);
});""",
        """# Good: Flask login with TOTP-based 2FA
from flask import Flask, request, abort
import pyotp
from yourmodels import get_user, verify_password

app = Flask(__name__)

@app.route('/login', methods=['POST'])
def login():
    user = get_user(request.form['username'])
    if not user or not verify_password(user, request.form['password']):
        abort(401)
    totp = pyotp.TOTP(user.totp_secret)
    if not totp.verify(request.form['otp']):
        abort(401)
    return 'Authenticated'""",
    ),
    bad_samples=(
        """// Bad: no rate limiting and short PIN
app.post('/login', (req, res) => {
  const { username, pin } = req.body;
  if (authenticatePin(username, pin)) {
    res.send('OK');
  } else {
    res.status(401).send('Fail');
  }
});""",
        """# Bad: numeric-only 4-digit PIN check
def authenticate(user, pin):
    return get_user_pin(user) == pin  # 4-digit PIN easily brute-forced""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-1390",
        paragraphs=(
            "CWE-1390, “Weak Authentication,” occurs when a product’s authentication "
            "mechanism does not sufficiently prove that the claimed identity is "
            "correct, allowing attackers to bypass authentication with less effort "
            "than expected.",
            "Attackers may exploit weak or easily guessable credentials - such as "
            "short PINs or missing rate limits - to gain unauthorized access quickly.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2025-26343",
                "A weak PIN-based authentication in Q-Free MaxTime ≤2.11.0 allowed "
                "unauthenticated remote attackers to brute-force user PINs via "
                "crafted HTTP requests.",
            ),
            CVEReference(
                "CVE-2025-24070",
                "Weak authentication in ASP.NET Core & Visual Studio allowed "
                "unauthorized attackers to elevate privileges over a network due to "
                "insufficient identity proofing.",
            ),
        ),
        closing=(
            "Remediation: Adopt multi-factor or challenge–response authentication, "
            "enforce strong, high-entropy credentials, implement rate-limiting or "
            "account lockout, and use vetted authentication libraries and protocols."
        ),
    ),
)

CWE_593 = CWEPage(
    cwe_id="CWE-593",
    title=(
        "Authentication Bypass: OpenSSL CTX Object Modified after SSL Objects are "
        "Created"
    ),
    best_practices=(
        "Fully configure SSL_CTX (certificates, keys, options, callbacks) before "
        "creating any SSL objects with SSL_new.",
        "Avoid modifying SSL_CTX parameters (e.g., password callbacks, options) after "
        "SSL objects have been created.",
        "If different TLS settings are needed, create separate SSL_CTX instances "
        "instead of reconfiguring a single context.",
        "Use high-level TLS libraries or frameworks that abstract SSL_CTX management "
        "and prevent unsafe modifications.",
        "Review and audit all SSL_CTX_* calls to ensure they occur prior to any "
        "SSL_new or handshake initiation.",
    ),
    bad_practices=(
        "Calling SSL_CTX_* functions (like SSL_CTX_set_default_passwd_cb) after "
        "SSL_new, retroactively affecting existing SSL objects.",
        "Reusing a single SSL_CTX instance and reconfiguring it mid-connection for "
        "multiple connections.",
        "Failing to set certificate verification modes before negotiating "
        "connections, leading to authentication bypass.",
        "Directly manipulating internal SSL_CTX fields without proper ordering, "
        "causing race conditions in multi-threaded use.",
        "Relying on default SSL_CTX settings and modifying them after some SSL "
        "objects are already in use.",
    ),
    good_samples=(
        """// Good: configure SSL_CTX fully before creating SSL objects
const char *cert = "server.crt";
const char *key  = "server.key";
SSL_CTX *ctx = SSL_CTX_new(TLS_server_method());
SSL_CTX_set_cipher_list(ctx, "HIGH:!aNULL");
SSL_CTX_use_certificate_file(ctx, cert, SSL_FILETYPE_PEM);
SSL_CTX_use_PrivateKey_file(ctx, key, SSL_FILETYPE_PEM);
// set password callback before any SSL_new calls
SSL_CTX_set_default_passwd_cb(ctx, password_cb);
SSL_CTX_set_default_passwd_cb_userdata(ctx, cb_data);
// now safe to create SSL objects
SSL *ssl1 = SSL_new(ctx);
SSL *ssl2 = SSL_new(ctx);""",
        """// Good: separate contexts for different configurations
SSL_CTX *ctxA = SSL_CTX_new(TLS_client_method());
// configure ctxA...
SSL_CTX *ctxB = SSL_CTX_new(TLS_client_method());
// configure ctxB differently...
SSL *first  = SSL_new(ctxA);
SSL *second = SSL_new(ctxB);""",
    ),
    bad_samples=(
        """// Bad: modifying context after creating first SSL object
SSL_CTX *ctx = SSL_CTX_new(TLS_server_method());
// ... load cert/key ...
SSL *ssl1 = SSL_new(ctx);
SSL_CTX_set_default_passwd_cb(ctx, password_cb); // too late - changes all SSL objects!
SSL *ssl2 = SSL_new(ctx);""",
        """// Bad: reusing context for different ciphers without separate instances
SSL_CTX *ctx = SSL_CTX_new(TLS_client_method());
SSL_CTX_set_cipher_list(ctx, "AES128-SHA");
SSL *sslA = SSL_new(ctx);
// later...
SSL_CTX_set_cipher_list(ctx, "AES256-SHA"); // affects existing and future sessions!
SSL *sslB = SSL_new(ctx);""",
    ),
    explanation=Explanation(
        heading="Understanding CWE-593",
        paragraphs=(
            "CWE-593 occurs when an application modifies an SSL_CTX object after "
            "creating one or more SSL objects from it. Because many SSL_CTX_* "
            "settings are inherited by existing SSL instances, late modifications can "
            "unexpectedly alter the behavior of active connections, potentially "
            "bypassing authentication or exposing plaintext data.",
            "MITRE Demonstrative Example: After calling SSL_new(ctx), invoking "
            "SSL_CTX_set_default_passwd_cb(ctx,...) changes the password callback for "
            "all SSL objects - old and new - leading to unpredictable authentication "
            "behavior.",
        ),
        cve_references=(
            CVEReference(
                "CVE-2014-0224",
                "A ChangeCipherSpec (CCS) injection vulnerability in older OpenSSL "
                "versions allowed a Man-in-the-Middle attacker to bypass "
                "authentication by altering cipher state mid-handshake - an attack "
                "analogous to modifying context parameters after SSL objects are "
                "created.",
            ),
        ),
        closing=(
            "Remediation: Always finalize all SSL_CTX configuration - load "
            "certificates, set verify modes, register callbacks, and choose ciphers - "
            "before any SSL_new or handshake is performed. If you need different "
            "settings for different connections, create separate SSL_CTX instances "
            "rather than reusing and modifying a single context."
        ),
    ),
)

PAGES = (
    CWE_302,
    CWE_303,
    CWE_304,
    CWE_640,
    CWE_916,
    CWE_836,
    CWE_1390,
    CWE_593,
)

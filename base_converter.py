import logging
import math
import string
from enum import Enum

from flask import Flask, jsonify, render_template_string, request

app = Flask(__name__)
logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')
MAX_INPUT_LENGTH = 100
DEFAULT_FROM = "dec"
DEFAULT_TO = "hex"
ERROR_SENTINEL = "Error"

app.config.update(
    MAX_INPUT_LENGTH=MAX_INPUT_LENGTH,
    DEFAULT_FROM=DEFAULT_FROM,
    DEFAULT_TO=DEFAULT_TO,
)
app.config.from_prefixed_env()


class Base(Enum):
    """Supported numeral bases: form key, radix and display name."""

    BIN = ("bin", 2, "Binary")
    OCT = ("oct", 8, "Octal")
    DEC = ("dec", 10, "Decimal")
    HEX = ("hex", 16, "Hexadecimal")

    def __init__(self, key: str, radix: int, display_name: str):
        self.key = key
        self.radix = radix
        self.display_name = display_name

    @classmethod
    def from_key(cls, key: str) -> "Base":
        cleaned = (key or "").strip().lower()
        for base in cls:
            if base.key == cleaned:
                return base
        raise ValueError(f"Unsupported base '{key}'. Choose one of: {', '.join(b.key for b in cls)}.")


# Order of the options in both selectors.
SELECTOR_ORDER = (Base.BIN, Base.DEC, Base.HEX, Base.OCT)


class InvalidNumber(ValueError):
    """Raised when a string has no leading numeral in the source base."""

    def __init__(self, value: str, base: Base):
        self.value = value
        self.base = base
        super().__init__(f"'{value}' is not a valid {base.display_name.lower()} number (base {base.radix}).")


HTML_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <title>Base Converter</title>
    <style>
        body { font-family: system-ui, sans-serif; margin: 0; padding: 24px; box-sizing: border-box;
            background: linear-gradient(135deg, #eff6ff, #ffffff); min-height: 100vh;
            display: flex; justify-content: center; align-items: center; }
        .container { background: #fff; border: 1px solid #dbeafe; border-radius: 16px;
            box-shadow: 0 8px 24px rgba(30,64,175,0.12); width: 100%; max-width: 28rem; padding: 32px; box-sizing: border-box; }
        h1 { margin: 0 0 20px 0; font-weight: 600; font-size: 1.5rem; color: #1d4ed8; text-align: center; }
        label { display: block; font-size: 0.875rem; font-weight: 500; color: #2563eb; }
        .field { position: relative; margin-top: 8px; }
        input[type=text], select { width: 100%; padding: 8px 12px; border-radius: 8px; border: 1px solid #bfdbfe;
            background: #eff6ff; font-size: 1rem; box-sizing: border-box; outline: none; }
        input[type=text] { padding-right: 48px; font-family: monospace; }
        input[type=text]:focus, select:focus { box-shadow: 0 0 0 2px #60a5fa; }
        input.invalid { border-color: #f87171; }
        .badge { position: absolute; right: 12px; top: 10px; font-size: 0.75rem; color: #3b82f6; }
        .preview { font-size: 0.75rem; color: #3b82f6; margin: 8px 0 0 0; min-height: 1em; }
        .selectors { display: flex; align-items: center; gap: 12px; margin-top: 16px; }
        .selectors select { flex: 1; }
        button { cursor: pointer; border: none; border-radius: 8px; transition: background-color 0.3s ease; }
        .swap { padding: 8px 12px; background: #dbeafe; color: #1d4ed8; font-size: 1rem; }
        .swap:hover { background: #bfdbfe; }
        .convert { width: 100%; margin-top: 20px; padding: 10px; background: #2563eb; color: #fff; font-size: 1rem; }
        .convert:hover { background: #1d4ed8; }
        .convert:disabled { background: #d1d5db; cursor: not-allowed; }
        .result { margin-top: 20px; padding: 16px; border-radius: 8px; background: #eff6ff; border: 1px solid #bfdbfe; }
        .result-head { display: flex; justify-content: space-between; align-items: center; margin-bottom: 4px;
            font-size: 0.875rem; font-weight: 500; color: #1d4ed8; }
        .copy { padding: 4px 8px; background: #dbeafe; color: #1d4ed8; font-size: 0.875rem; }
        .result-value { font-size: 1.125rem; font-weight: 600; color: #1e40af; word-break: break-all; margin: 0; }
        .result-base { font-size: 0.75rem; color: #3b82f6; margin: 0; }
        .error { margin-top: 20px; padding: 12px; border-radius: 8px; background: #fee2e2; color: #b91c1c; font-weight: 600; }
    </style>
</head>
<body>
<div class="container">
    <h1>Base Converter</h1>
    <form method="post" id="converter" novalidate>
        <label for="number">Number</label>
        <div class="field">
            <input type="text" name="number" id="number" value="{{ number }}" autocomplete="off"
                   class="{% if not valid %}invalid{% endif %}"
                   placeholder="Enter {{ base_from.display_name|lower }} value" />
            <span class="badge" id="badge">{{ base_from.key|upper }}</span>
        </div>
        <p class="preview" id="preview">{% if preview is not none %}Decimal: <strong>{{ preview }}</strong>{% endif %}</p>
        <input type="hidden" name="result" value="{{ result }}" />
        <div class="selectors">
            <select name="base_from" id="base_from">
                {% for b in bases %}
                    <option value="{{ b.key }}" {% if b == base_from %}selected{% endif %}>{{ b.display_name }}</option>
                {% endfor %}
            </select>
            <button type="submit" class="swap" name="action" value="swap" title="Swap bases">&#8646;</button>
            <select name="base_to" id="base_to">
                {% for b in bases %}
                    <option value="{{ b.key }}" {% if b == base_to %}selected{% endif %}>{{ b.display_name }}</option>
                {% endfor %}
            </select>
        </div>
        <button type="submit" class="convert" id="convert" name="action" value="convert" {% if not number %}disabled{% endif %}>Convert</button>
    </form>
    {% if error %}
        <div class="error">{{ error }}</div>
    {% endif %}
    {% if result %}
        <div class="result">
            <div class="result-head">
                <span>Result</span>
                <button type="button" class="copy" id="copy">Copy</button>
            </div>
            <p class="result-value" id="result-value">{{ result }}</p>
            <p class="result-base">{{ base_to.display_name }}</p>
        </div>
    {% endif %}
</div>
<script>
    document.addEventListener('DOMContentLoaded', function() {
        const input = document.getElementById('number');
        const baseFrom = document.getElementById('base_from');
        const badge = document.getElementById('badge');
        const preview = document.getElementById('preview');
        const convertButton = document.getElementById('convert');
        const copyButton = document.getElementById('copy');
        const bases = {{ base_names|tojson }};

        function refresh() {
            convertButton.disabled = !input.value;
            badge.textContent = baseFrom.value.toUpperCase();
            input.placeholder = 'Enter ' + bases[baseFrom.value].toLowerCase() + ' value';
            const params = new URLSearchParams({value: input.value, base: baseFrom.value});
            fetch('{{ url_for("validate") }}?' + params)
                .then(response => response.json())
                .then(data => {
                    input.classList.toggle('invalid', !data.valid);
                    preview.innerHTML = data.decimal === null ? '' : 'Decimal: <strong>' + data.decimal + '</strong>';
                });
        }
        input.addEventListener('input', refresh);
        baseFrom.addEventListener('change', refresh);

        if (copyButton) {
            copyButton.addEventListener('click', function() {
                const text = document.getElementById('result-value').textContent;
                navigator.clipboard.writeText(text);
                copyButton.textContent = 'Copied';
                setTimeout(() => { copyButton.textContent = 'Copy'; }, 1200);
            });
        }
    });
</script>
</body>
</html>
"""


def digit_value(char):
    if char in string.digits:
        return ord(char) - ord('0')
    if char in string.ascii_letters:
        return 10 + ord(char.upper()) - ord('A')
    return None


def is_valid(value: str, base: Base) -> bool:
    for char in value:
        digit = digit_value(char)
        if digit is None or digit >= base.radix:
            return False
    return True


def parse_prefix(value: str, base: Base) -> int:
    # Same rules as a browser's parseInt: "12abc" in decimal is 12.
    text = value.lstrip()
    sign = 1
    if text[:1] in ('+', '-'):
        if text[0] == '-':
            sign = -1
        text = text[1:]
    if base is Base.HEX and text[:2].lower() == '0x':
        text = text[2:]
    length = 0
    for char in text:
        digit = digit_value(char)
        if digit is None or digit >= base.radix:
            break
        length += 1
    if not length:
        raise InvalidNumber(value, base)
    try:
        return sign * int(text[:length], base.radix)
    except ValueError as e:
        # Decimal strings past sys.get_int_max_str_digits()
        raise InvalidNumber(value, base) from e


def render(number, base):
    sign = "-" if number < 0 else ""
    number = abs(number)
    if base is Base.DEC:
        digits = str(number)
    elif base is Base.HEX:
        digits = hex(number)[2:].upper()
    elif base is Base.OCT:
        digits = oct(number)[2:]
    else:
        digits = bin(number)[2:]
    return sign + digits


def convert(value: str, from_base: Base, to_base: Base) -> str:
    number = parse_prefix(value, from_base)
    try:
        result = render(number, to_base)
    except ValueError as e:
        raise InvalidNumber(value, from_base) from e
    logging.debug(f"Converted '{value}' from {from_base.key} to {to_base.key}: {result}")
    return result


def decimal_preview(value, base):
    """Decimal value of a valid input as a string, or None."""
    if not value or not is_valid(value, base):
        return None
    try:
        return render(parse_prefix(value, base), Base.DEC)
    except ValueError:
        return None


def max_length(base, limit):
    """Longest input accepted in ``base``: a ``limit``-digit hex magnitude plus a sign."""
    bits = 4 * limit
    if base is Base.DEC:
        digits = math.ceil(bits * math.log10(2))
    else:
        digits = -(-bits // (base.radix.bit_length() - 1))
    return digits + 1


def _preview(value, base):
    if len(value) > max_length(base, app.config["MAX_INPUT_LENGTH"]):
        return None
    return decimal_preview(value, base)


def _page(**overrides):
    base_from = Base.from_key(app.config["DEFAULT_FROM"])
    context = {
        "bases": SELECTOR_ORDER,
        "base_names": {b.key: b.display_name for b in Base},
        "error": None,
        "number": "",
        "result": "",
        "base_from": base_from,
        "base_to": Base.from_key(app.config["DEFAULT_TO"]),
    }
    context.update(overrides)
    context["valid"] = is_valid(context["number"], context["base_from"])
    context["preview"] = _preview(context["number"], context["base_from"])
    return render_template_string(HTML_TEMPLATE, **context)


@app.route("/", methods=["GET", "POST"])
def index():
    if request.method == "GET":
        return _page()
    number = request.form.get("number", "")
    result = request.form.get("result", "")
    action = request.form.get("action", "convert")
    try:
        base_from = Base.from_key(request.form.get("base_from", app.config["DEFAULT_FROM"]))
        base_to = Base.from_key(request.form.get("base_to", app.config["DEFAULT_TO"]))
    except ValueError as e:
        logging.warning(f"Rejected form: {e}")
        return _page(number=number, error=str(e))
    try:
        if action == "swap":
            return _page(number=result, result=number, base_from=base_to, base_to=base_from)
        if not number:
            return _page(base_from=base_from, base_to=base_to)
        limit = max_length(base_from, app.config["MAX_INPUT_LENGTH"])
        if len(number) > limit:
            logging.warning(f"Rejected input of length {len(number)}")
            return _page(number=number, base_from=base_from, base_to=base_to,
                         error=f"Input is too long (max {limit} characters).")
        try:
            result = convert(number, base_from, base_to)
        except InvalidNumber as e:
            logging.warning(str(e))
            result = ERROR_SENTINEL
        return _page(number=number, result=result, base_from=base_from, base_to=base_to)
    except Exception as e:
        logging.error(f"An unhandled exception occurred: {e}", exc_info=True)
        return _page(number=number, base_from=base_from, base_to=base_to,
                     error="A critical server error occurred. Please try again.")


@app.route("/validate")
def validate():
    value = request.args.get("value", "")
    try:
        base = Base.from_key(request.args.get("base", app.config["DEFAULT_FROM"]))
    except ValueError as e:
        return jsonify(error=str(e)), 400
    return jsonify(valid=is_valid(value, base), decimal=_preview(value, base))


if __name__ == "__main__":
    app.run(debug=True, port=5001)

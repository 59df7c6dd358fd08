"""Parse "name: value" pairs and capture the value with a semantic action."""

from parsecomb import and_, any_, lit, opt, parse

space = opt(lit(" "))


def keep_value(matched, payload):
    payload["value"] = matched
    return payload


pair = and_([lit("name"), space, lit(":"), space, any_(lit(";"), keep_value), lit(";")])

for text in ("name:adam;", "NAME : Grace Hopper;", "nom:x;"):
    result = parse(pair, text, {})
    print(f"{text!r:26} -> success={result.success} tokens={result.tokens} payload={result.payload}")

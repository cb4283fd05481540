"""
Grammar reference for URI patterns.

Grammar Specification
=====================

<pattern>   ::= "/" <segment> ( "/" <segment> )*
<segment>   ::= <literal>* [ <variable> <literal>* ]
<variable>  ::= "{" [ "+" ] <name> "}"
<name>      ::= <char except "{", "}">+
<literal>   ::= <char except "{", "}", "/">

A segment holds at most one variable. A reserved variable ``{+name}``
captures the rest of the path, slashes included, and must be the very last
thing in the pattern. A name may contain any character but braces, "/"
included, and may repeat within a pattern.

Segment Kinds (most to least specific)
======================================
- literal:  /users
- mixed:    /v{version}  /{name}.json
- variable: /{id}
- reserved: /{+path}  /static{+path}

Pattern Examples
================
/
/users/{id}
/a/{x}/c/de{+y}
/docs/index          # answers /docs, never /docs/index
"""

SEPARATOR = "/"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"
RESERVED_MARKER = "+"

# Characters RFC 3986 reserves but which are plain literals in a pattern.
LITERAL_SYMBOLS = "-._~?#[]@!$&'()+,;="

# A final segment with exactly this literal makes the pattern answer for
# its parent path instead.
INDEX_SEGMENT = "index"

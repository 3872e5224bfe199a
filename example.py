#!/usr/bin/env python3
"""
Example usage of Line Layout.

This script demonstrates toggling a JSON-like object between single-line
and multi-line layout and compacting a list of multi-line blocks.
"""

from line_layout import LayoutTransformer, TransformOptions


def main():
    """Main example function."""
    print("Line Layout Example")
    print("=" * 50)

    transformer = LayoutTransformer()

    single_line = '{ "name": "Alice", "tags": ["admin", "dev"], "age": 30 }'

    print("\n1. Expanding a single-line object:")
    expanded = transformer.toggle(single_line)
    print(expanded.text)

    print("\n2. Collapsing it again:")
    print(transformer.toggle(expanded.text).text)

    print("\n3. Commas at the start of new lines:")
    print(transformer.toggle(single_line, TransformOptions(is_comma_on_new_line=True)).text)

    blocks = "\n".join([
        '    {',
        '        "name": "content",',
        '        "regexp": "*"',
        '    },',
        '    {',
        '        "name": "filename",',
        '        "regexp": "*"',
        '    },',
    ])

    print("\n4. Compacting blocks to one per line:")
    result = transformer.compact(blocks)
    print(result.text)

    print("\n5. Empty selections are left alone:")
    empty = transformer.toggle("   ")
    print(f"   success={empty.success}, errors={empty.errors}")


if __name__ == "__main__":
    main()

from . import chart_from_program, check_consistency, create_pie_chart, parse_program, validate

DEMO = """
chart width=100 height=100 radius=40
labels color=0,0,0 font="sans-serif" size=10 radius=20
slice "Red" 0.5 #fe5555
slice "Green" 10% #55fe55
slice "Blue" 0.25 #3366fe
slice "Other" 0.15 #999
"""

def run():
    prog = parse_program(DEMO)
    validate(prog)
    slices, options = chart_from_program(prog)
    print(f"Parsed slices: {slices}\n")

    warnings = check_consistency(slices)
    print("Warnings:")
    if warnings:
        for warning in warnings:
            print(f"  - {warning}")
    else:
        print("  (none)")

    print(create_pie_chart(slices, options))


if __name__ == "__main__":
    run()

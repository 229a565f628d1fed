from infix_calc.cli import app

app(prog_name="infix-calc")

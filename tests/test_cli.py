import io
import sys

from afrilang.cli import main, run_console, run_file

WELCOME = "Bienvenue dans Afrilang. Veuillez saisir vos lignes de code."


def write_program(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_run_file_executes_lines_with_shared_variables(tmp_path):
    path = write_program(tmp_path, "prog.afr", 'x = 7\nafficher(x)\nafficher("fin")\n')
    out, err = io.StringIO(), io.StringIO()
    run_file(str(path), out, err)
    assert out.getvalue() == "7.000000\nfin\n"
    assert err.getvalue() == ""


def test_run_file_error_only_stops_its_line(tmp_path):
    path = write_program(tmp_path, "prog.afr", '+\nafficher("ok")')
    out, err = io.StringIO(), io.StringIO()
    run_file(str(path), out, err)
    assert out.getvalue() == "ok\n"
    assert err.getvalue() == "Erreur : + non reconnu (ligne invalide)\n"


def test_run_file_rejects_wrong_extension(tmp_path):
    path = write_program(tmp_path, "prog.txt", 'afficher("x")\n')
    out, err = io.StringIO(), io.StringIO()
    run_file(str(path), out, err)
    assert out.getvalue() == ""
    assert err.getvalue() == "Erreur : Fichier non reconnu. L'extention doit être '.afr'\n"


def test_run_file_missing_file(tmp_path):
    name = str(tmp_path / "absent.afr")
    out, err = io.StringIO(), io.StringIO()
    run_file(name, out, err)
    assert err.getvalue() == f"Erreur lors de l'ouverture du fichier : '{name}'\n"


def test_run_console_stops_at_quit():
    stdin = io.StringIO('afficher("salut")\nquit\nafficher("jamais")\n')
    out, err = io.StringIO(), io.StringIO()
    run_console(stdin, out, err)
    text = out.getvalue()
    assert WELCOME in text
    assert "salut\n" in text
    assert "jamais" not in text
    assert text.count(">> ") == 2


def test_run_console_stops_at_end_of_input():
    stdin = io.StringIO("x = 3\nafficher(x)\n")
    out, err = io.StringIO(), io.StringIO()
    run_console(stdin, out, err)
    text = out.getvalue()
    assert text.count(">> ") == 3
    assert "3.000000\n" in text
    assert err.getvalue() == ""


def test_main_usage_message(capsys):
    assert main(["a.afr", "b.afr"]) == 0
    captured = capsys.readouterr()
    assert captured.err == "Format d'entrée : './Afrilang' ou './Afrilang fileName'\n"


def test_main_runs_file(tmp_path, capsys):
    path = write_program(tmp_path, "prog.afr", 'afficher("bonjour")\n')
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "bonjour\n"


def test_main_console(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO('afficher("salut")\nquit\n'))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert WELCOME in out
    assert "salut\n" in out


def test_main_reports_unknown_variable_and_fails(tmp_path, capsys):
    path = write_program(tmp_path, "prog.afr", 'x = y\nafficher("apres")\n')
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "Erreur : Variables 'y' non reconnu" in captured.err
    assert "apres" not in captured.out
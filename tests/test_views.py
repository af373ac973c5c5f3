from cookielogin.views import render_home, render_login


def test_home_contains_username_and_logout_link():
    html = render_home("john")
    assert "john" in html
    assert 'href="/logout"' in html


def test_home_escapes_username():
    html = render_home("<script>x</script>")
    assert "<script>x</script>" not in html
    assert "&lt;script&gt;" in html


def test_login_form_fields():
    html = render_login()
    assert 'action="/login"' in html
    assert 'name="username"' in html
    assert 'name="password"' in html

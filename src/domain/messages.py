"""
User-facing messages.

The remote authority answers in Portuguese, so the client does too.
"""

NAME_NEEDS_SURNAME = "Insira nome e sobrenome"
LOGIN_TAKEN = "Este login já está em uso."

REGISTER_SUCCESS = "Usuário cadastrado com sucesso!"
REGISTER_FAILED = "Erro ao realizar cadastro."

SIGN_IN_WELCOME = "Bem-vindo, {name}!"
SIGN_IN_FAILED = "Login falhou."
SIGN_IN_UNREACHABLE = "Erro ao conectar com o servidor."

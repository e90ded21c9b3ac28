from mlisp.reader.parser import Lexer, TokenStream, lex, read

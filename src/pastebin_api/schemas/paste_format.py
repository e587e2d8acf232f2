"""
Syntax-highlighting formats accepted by the Pastebin API.

The member values are the exact ``api_paste_format`` tokens. Member names are
the upper-cased token with ``-`` replaced by ``_``; tokens that start with a
digit carry a ``FORMAT_`` prefix.
"""

from enum import Enum


class PasteFormat(str, Enum):
    """Closed set of paste formats (``api_paste_format``)."""

    FORMAT_4CS = "4cs"
    FORMAT_6502ACME = "6502acme"
    FORMAT_6502KICKASS = "6502kickass"
    FORMAT_6502TASM = "6502tasm"
    ABAP = "abap"
    ACTIONSCRIPT = "actionscript"
    ACTIONSCRIPT3 = "actionscript3"
    ADA = "ada"
    AIMMS = "aimms"
    ALGOL68 = "algol68"
    APACHE = "apache"
    APPLESCRIPT = "applescript"
    APT_SOURCES = "apt_sources"
    ARDUINO = "arduino"
    ARM = "arm"
    ASM = "asm"
    ASP = "asp"
    ASYMPTOTE = "asymptote"
    AUTOCONF = "autoconf"
    AUTOHOTKEY = "autohotkey"
    AUTOIT = "autoit"
    AVISYNTH = "avisynth"
    AWK = "awk"
    BASCOMAVR = "bascomavr"
    BASH = "bash"
    BASIC4GL = "basic4gl"
    DOS = "dos"
    BIBTEX = "bibtex"
    B3D = "b3d"
    BLITZBASIC = "blitzbasic"
    BMX = "bmx"
    BNF = "bnf"
    BOO = "boo"
    BF = "bf"
    C = "c"
    CSHARP = "csharp"
    C_WINAPI = "c_winapi"
    CPP = "cpp"
    CPP_WINAPI = "cpp-winapi"
    CPP_QT = "cpp-qt"
    C_LOADRUNNER = "c_loadrunner"
    CADDCL = "caddcl"
    CADLISP = "cadlisp"
    CEYLON = "ceylon"
    CFDG = "cfdg"
    C_MAC = "c_mac"
    CHAISCRIPT = "chaiscript"
    CHAPEL = "chapel"
    CIL = "cil"
    CLOJURE = "clojure"
    KLONEC = "klonec"
    KLONECPP = "klonecpp"
    CMAKE = "cmake"
    COBOL = "cobol"
    COFFEESCRIPT = "coffeescript"
    CFM = "cfm"
    CSS = "css"
    CUESHEET = "cuesheet"
    D = "d"
    DART = "dart"
    DCL = "dcl"
    DCPU16 = "dcpu16"
    DCS = "dcs"
    DELPHI = "delphi"
    OXYGENE = "oxygene"
    DIFF = "diff"
    DIV = "div"
    DOT = "dot"
    E = "e"
    EZT = "ezt"
    ECMASCRIPT = "ecmascript"
    EIFFEL = "eiffel"
    EMAIL = "email"
    EPC = "epc"
    ERLANG = "erlang"
    EUPHORIA = "euphoria"
    FSHARP = "fsharp"
    FALCON = "falcon"
    FILEMAKER = "filemaker"
    FO = "fo"
    F1 = "f1"
    FORTRAN = "fortran"
    FREEBASIC = "freebasic"
    FREESWITCH = "freeswitch"
    GAMBAS = "gambas"
    GML = "gml"
    GDB = "gdb"
    GDSCRIPT = "gdscript"
    GENERO = "genero"
    GENIE = "genie"
    GETTEXT = "gettext"
    GO = "go"
    GODOT_LSL = "godot-lsl"
    GROOVY = "groovy"
    GWBASIC = "gwbasic"
    HASKELL = "haskell"
    HAXE = "haxe"
    HICEST = "hicest"
    HQ9PLUS = "hq9plus"
    HTML4STRICT = "html4strict"
    HTML5 = "html5"
    ICON = "icon"
    IDL = "idl"
    INI = "ini"
    INNO = "inno"
    INTERCAL = "intercal"
    IO = "io"
    ISPFPANEL = "ispfpanel"
    J = "j"
    JAVA = "java"
    JAVA5 = "java5"
    JAVASCRIPT = "javascript"
    JCL = "jcl"
    JQUERY = "jquery"
    JSON = "json"
    JULIA = "julia"
    KIXTART = "kixtart"
    KOTLIN = "kotlin"
    KSP = "ksp"
    LATEX = "latex"
    LDIF = "ldif"
    LB = "lb"
    LSL2 = "lsl2"
    LISP = "lisp"
    LLVM = "llvm"
    LOCOBASIC = "locobasic"
    LOGTALK = "logtalk"
    LOLCODE = "lolcode"
    LOTUSFORMULAS = "lotusformulas"
    LOTUSSCRIPT = "lotusscript"
    LSCRIPT = "lscript"
    LUA = "lua"
    M68K = "m68k"
    MAGIKSF = "magiksf"
    MAKE = "make"
    MAPBASIC = "mapbasic"
    MARKDOWN = "markdown"
    MATLAB = "matlab"
    MERCURY = "mercury"
    METAPOST = "metapost"
    MIRC = "mirc"
    MMIX = "mmix"
    MK_61 = "mk-61"
    MODULA2 = "modula2"
    MODULA3 = "modula3"
    FORMAT_68000DEVPAC = "68000devpac"
    MPASM = "mpasm"
    MXML = "mxml"
    MYSQL = "mysql"
    NAGIOS = "nagios"
    NETREXX = "netrexx"
    NEWLISP = "newlisp"
    NGINX = "nginx"
    NIM = "nim"
    NSIS = "nsis"
    OBERON2 = "oberon2"
    OBJECK = "objeck"
    OBJC = "objc"
    OCAML = "ocaml"
    OCAML_BRIEF = "ocaml-brief"
    OCTAVE = "octave"
    PF = "pf"
    GLSL = "glsl"
    OOREXX = "oorexx"
    OOBAS = "oobas"
    ORACLE8 = "oracle8"
    ORACLE11 = "oracle11"
    OZ = "oz"
    PARASAIL = "parasail"
    PARIGP = "parigp"
    PASCAL = "pascal"
    PAWN = "pawn"
    PCRE = "pcre"
    PER = "per"
    PERL = "perl"
    PERL6 = "perl6"
    PHIX = "phix"
    PHP = "php"
    PHP_BRIEF = "php-brief"
    PIC16 = "pic16"
    PIKE = "pike"
    PIXELBENDER = "pixelbender"
    PLI = "pli"
    PLSQL = "plsql"
    POSTGRESQL = "postgresql"
    POSTSCRIPT = "postscript"
    POVRAY = "povray"
    POWERBUILDER = "powerbuilder"
    POWERSHELL = "powershell"
    PROFTPD = "proftpd"
    PROGRESS = "progress"
    PROLOG = "prolog"
    PROPERTIES = "properties"
    PROVIDEX = "providex"
    PUPPET = "puppet"
    PUREBASIC = "purebasic"
    PYCON = "pycon"
    PYTHON = "python"
    PYS60 = "pys60"
    Q = "q"
    QBASIC = "qbasic"
    QML = "qml"
    RSPLUS = "rsplus"
    RACKET = "racket"
    RAILS = "rails"
    RBS = "rbs"
    REBOL = "rebol"
    REG = "reg"
    REXX = "rexx"
    ROBOTS = "robots"
    ROFF = "roff"
    RPMSPEC = "rpmspec"
    RUBY = "ruby"
    GNUPLOT = "gnuplot"
    RUST = "rust"
    SAS = "sas"
    SCALA = "scala"
    SCHEME = "scheme"
    SCILAB = "scilab"
    SCL = "scl"
    SDLBASIC = "sdlbasic"
    SMALLTALK = "smalltalk"
    SMARTY = "smarty"
    SPARK = "spark"
    SPARQL = "sparql"
    SQF = "sqf"
    SQL = "sql"
    SSHCONFIG = "sshconfig"
    STANDARDML = "standardml"
    STONESCRIPT = "stonescript"
    SCLANG = "sclang"
    SWIFT = "swift"
    SYSTEMVERILOG = "systemverilog"
    TSQL = "tsql"
    TCL = "tcl"
    TERATERM = "teraterm"
    TEXGRAPH = "texgraph"
    THINBASIC = "thinbasic"
    TYPESCRIPT = "typescript"
    TYPOSCRIPT = "typoscript"
    UNICON = "unicon"
    USCRIPT = "uscript"
    UPC = "upc"
    URBI = "urbi"
    VALA = "vala"
    VBNET = "vbnet"
    VBSCRIPT = "vbscript"
    VEDIT = "vedit"
    VERILOG = "verilog"
    VHDL = "vhdl"
    VIM = "vim"
    VB = "vb"
    VISUALFOXPRO = "visualfoxpro"
    VISUALPROLOG = "visualprolog"
    WHITESPACE = "whitespace"
    WHOIS = "whois"
    WINBATCH = "winbatch"
    XBASIC = "xbasic"
    XML = "xml"
    XOJO = "xojo"
    XORG_CONF = "xorg_conf"
    XPP = "xpp"
    YAML = "yaml"
    YARA = "yara"
    Z80 = "z80"
    ZXBASIC = "zxbasic"

    @classmethod
    def parse(cls, value: "PasteFormat | str") -> "PasteFormat":
        """Coerce a token to a format, matching case-insensitively.

        Raises:
            ValueError: the token is not a known format
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            lowered = str(value).strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
            raise

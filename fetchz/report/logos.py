"""Static logo table: art, accent colour and column width per OS family."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

RESET = "\x1b[0m"


class Color(Enum):
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    DEFAULT = 39

    @property
    def ansi(self) -> str:
        return f"\x1b[{self.value}m"

    @property
    def bold(self) -> str:
        return f"\x1b[1;{self.value}m"


@dataclass(frozen=True)
class Logo:
    name: str
    art: tuple[str, ...]
    color: Color
    width: int


def _logo(name: str, color: Color, *art: str) -> Logo:
    return Logo(name=name, art=art, color=color, width=max(len(line) for line in art))


LINUX = _logo(
    "linux", Color.WHITE,
    r"        _nnnn_         ",
    r"       dGGGGMMb        ",
    r"      @p~qp~~qMb       ",
    r"      M|@||@) M|       ",
    r"      @,----.JM|       ",
    r"     JS^\__/  qKL      ",
    r"    dZP        qKRb    ",
    r"   dZP          qKKb   ",
    r"  fZP            SMMb  ",
    r"  HZM            MMMM  ",
    r"  FqM            MMMM  ",
    r'__| ".        |\dS"qML ',
    r"|    `.       | `' \Zq ",
    r"_)      \.___.,|     .'",
    r"\____   )MMMMMP|   .'  ",
    r"     `-'       `--'    ",
)

ARCH = _logo(
    "arch", Color.CYAN,
    r"        /\          ",
    r"       /  \         ",
    r"      /\   \        ",
    r"     /      \       ",
    r"    /   ,,   \      ",
    r"   /   |  |  -\     ",
    r"  /_-''    ''-_\    ",
)

UBUNTU = _logo(
    "ubuntu", Color.RED,
    r"            .-/+oossssoo+/-.",
    r"        `:+ssssssssssssssssss+:`",
    r"      -+ssssssssssssssssssyyssss+-",
    r"    .ossssssssssssssssss dMMMNy sssso.",
    r"   /sssssssssss hdMMMMNy hMMMMs +sssss\ ",
    r"  +sssssssss hMMMMMMMMMN `MMMM+  ssssss+",
    r" /ssssssssh MMMMMddddNMh  N MMN` sssssss\ ",
    r".ssssssss dMMMN        `  `MMMy ssssssss.",
    r"+ssss hMMMMy`             .NMN+ sssssss+",
    r"osss dMMMMs               +NMM- ssssssso",
    r"osss NMMMM                 mMMs ssssssso",
    r"+sss+mMMMMy`              oNMM+ sssssss+",
    r".sssso`mMMMMs         ..yNMMN`sssssss.",
    r" /sssss+ hNMMMN dddddNMMMN+ +sssssss\ ",
    r"  +ssssss+ `+mMMMMMMMN+  +sssssss+",
    r"   /sssssss+. `:oo:. .+sssssss\ ",
    r"    .osssssssso+++++ossssssso.",
    r"      -+sssssssssssssssss+-",
    r"        `:+ssssssssss+:`",
    r"            .-/++/-.",
)

DEBIAN = _logo(
    "debian", Color.RED,
    r"       _,met$$$$$gg.       ",
    r"    ,g$$$$$$$$$$$$$$$P.    ",
    r'  ,g$$P"         """Y$$.". ',
    r" ,$$P'               `$$$. ",
    r"',$$P       ,ggs.     `$$b:",
    r"""`d$$'     ,$P"'   .    $$$ """,
    r" $$P      d$'     ,    $$P ",
    r" $$:      $$.   -    ,d$$' ",
    r" $$;      Y$b._   _,d$P'   ",
    r""" Y$$.    `.`"Y$$$$P"'      """,
    r""" `$$b      "-.__           """,
    r"  `Y$$                     ",
    r"   `Y$$.                   ",
    r"     `$$b.                 ",
    r"       `Y$$b.              ",
    r"""          `"Y$b._          """,
    '              `""""        ',
)

FEDORA = _logo(
    "fedora", Color.BLUE,
    r"             .',;::::;,'.",
    r"         .';:cccccccccccc:;,.",
    r"      .;cccccccccccccccccccccc;.",
    r"    .:cccccccccccccccccccccccccc:.",
    r"  .;ccccccccccccc;.:dddl:.;ccccccc;.",
    r" .:ccccccccccccc;OWMKOOXMWd;ccccccc:.",
    r".:ccccccccccccc;KMMc;cc;xMMc;ccccccc:.",
    r",cccccccccccccc;MMM.;cc;;WW:;cccccccc,",
    r":cccccccccccccc;MMM.;cccccccccccccccc:",
    r":ccccccc;oxOOOo;MMM0OOk.;cccccccccccc:",
    r"cccccc;0MMKxdd:;MMMkddc.;cccccccccccc;",
    r"ccccc;XM0';cccc;MMM.;cccccccccccccccc'",
    r"ccccc;MMo;ccccc;MMW.;ccccccccccccccc;",
    r"ccccc;0MNc.ccc.xMMd;ccccccccccccccc;",
    r"cccccc;dNMWXXXWM0:;cccccccccccccc:,",
    r"cccccccc;.:odl:.;cccccccccccccc:,.",
    r":cccccccccccccccccccccccccccc:'.",
    r".:cccccccccccccccccccccc:;,..",
    r"  '::cccccccccccccc::;,.",
)

MACOS = _logo(
    "macos", Color.WHITE,
    r"                    'c.",
    r"                 ,xNMM.",
    r"               .OMMMMo",
    r"               OMMM0,",
    r"     .;loddo:' loolloddol;.",
    r"   cKMMMMMMMMMMNWMMMMMMMMMM0:",
    r" .KMMMMMMMMMMMMMMMMMMMMMMMWd.",
    r" XMMMMMMMMMMMMMMMMMMMMMMMX.",
    r";MMMMMMMMMMMMMMMMMMMMMMMM:",
    r":MMMMMMMMMMMMMMMMMMMMMMMM:",
    r".MMMMMMMMMMMMMMMMMMMMMMMMX.",
    r" kMMMMMMMMMMMMMMMMMMMMMMMMWd.",
    r" .XMMMMMMMMMMMMMMMMMMMMMMMMMMk",
    r"  .XMMMMMMMMMMMMMMMMMMMMMMMMK.",
    r"    kMMMMMMMMMMMMMMMMMMMMMMd",
    r"     ;KMMMMMMMWXXWMMMMMMMk.",
    r"       .cooc,.    .,coo:.",
)

NIXOS = _logo(
    "nixos", Color.CYAN,
    r"    \\  \\ //     ",
    r"   ==\\__\\/ //   ",
    r"     //   \\//    ",
    r"  ==//     //==   ",
    r"   //\\___//      ",
    r"  // /\\  \\==    ",
    r"    // \\  \\     ",
)

GENTOO = _logo(
    "gentoo", Color.MAGENTA,
    r"     .-----.       ",
    r"   .'       `.     ",
    r"  /   _   _   \    ",
    r" |   O   O   |     ",
    r" |  .-----.  |     ",
    r"  \  `---'  /      ",
    r"   `.     .'       ",
    r"     `---'         ",
)

OPENSUSE = _logo(
    "opensuse", Color.GREEN,
    r"              .;ldkO0000Okdl;.             ",
    r"          .;d00xl:^''''''^:ok00d;.         ",
    r"        .d00l'                'o00d.       ",
    r"      .d0Kd'  Okxol:;,.          :O0d.     ",
    r"     .OKKKK0kOKKKKKKKKKKOxo:,      lKO.    ",
    r"    ,0KKKKKKKKKKKKKKKK0P^,,,^dx:    ;00,   ",
    r"   .OKKKKKKKKKKKKKKKKk'.oOPPb.'0k.   cKO.  ",
    r"   :KKKKKKKKKKKKKKKKK: kKx..dd lKd   'OK:  ",
    r"   dKKKKKKKKKOx0KKKKKo .0KKKKP :KO   .OKd  ",
    r"   :KKKKKKKKKKo :OKKKKxdOKKKKo ;0d   'OK:  ",
    r"   .OKKKKKKKKKK:  ^OKKKKKKKKK: .:    cKO.  ",
    r"    ,0KKKKKKKKKKx; .lkOKKKKP'       ;00,   ",
    r"     .OKKKKKKKKKKKOxdoooodxko      lKO.    ",
    r"      .d0Kd'  'ldkxdol:;,.       :O0d.     ",
    r"        .d00l'                'o00d.       ",
    r"          .;d00xl:^''''''^:ok00d;.         ",
    r"              .;ldkO0000Okdl;.             ",
)

MANJARO = _logo(
    "manjaro", Color.GREEN,
    r" ||||||||| ||||",
    r" ||||||||| ||||",
    r" ||||      ||||",
    r" |||| |||| ||||",
    r" |||| |||| ||||",
    r" |||| |||| ||||",
    r" |||| |||| ||||",
)

MINT = _logo(
    "mint", Color.GREEN,
    r"             ...-:::::-...              ",
    r"          .-MMMMMMMMMMMMMMM-.           ",
    r"       .-MMMM`..-::::::-..'MMMM-.       ",
    r"     .:MMMM.:MMMMMMMMMMMMMMM:.MMMM:.    ",
    r"    -MMM-M---MMMMMMMMMMMMMMMMMMM.MMM-   ",
    r"   :MMM:MM`  :MMMM:....::-...-MMMM:MMM: ",
    r"   .MMM.MMMM`  :MM:`  ``    ``.MMMM.MMM.",
    r"    :MMM:MMMM:   .:    ..     .:MMM MMMM",
    r"     MMM:MMMMM: .:...    ..   .:MMM MMMM",
    r"     :MMMMMMMMM:.:::::::::...:MMMMM MMM:",
    r"      MMMMMMMMMMMMMMMMMMMMMMMMMMM MMMM  ",
    r"      :MMMMMMMMMMMMMMMMMMMMMMMMMM MMM:  ",
    r"       MMMMMMMMMM:-'````':MMMMMM MMM    ",
    r"        MMM:MMM:`          `:MMM:MMM    ",
    r"         .MMMM.              .MMMM.     ",
)

POP = _logo(
    "pop", Color.CYAN,
    r"             /////////////             ",
    r"         /////////////////////         ",
    r"      ///////*767////////////////      ",
    r"    //////7676767676*//////////////    ",
    r"   /////76767//7676767//////////////   ",
    r"  /////767676///*76767///////////////  ",
    r" ///////767676///76767.///7676*/////// ",
    r"/////////767676//76767///767676//////  ",
    r"//////////76767676767////76767///////  ",
    r"///////////76767676//////7676/////////",
    r"////////////,7676,///////767//////////",
    r"/////////////*7676///////76///////////",
    r" ///////////////7676////////////////// ",
    r"  ///////////////7676///767////////////",
    r"   //////////////////////'//////////// ",
    r"    //////.7676767676767676767,//////  ",
    r"      /////767676767676767676767/////  ",
    r"         /////////////////////         ",
    r"             /////////////             ",
)

VOID = _logo(
    "void", Color.GREEN,
    r"                __.;=====;.__         ",
    r"            _.=+==++=++=+=+===;.      ",
    r"             -=+++=+===+=+=+++++=_    ",
    r"        .     -=:``     `--==+=++==.  ",
    r"       _vi,    `            --+=++++: ",
    r"      .uvnvi.       _._       -==+==+.",
    r"     .vvnvnI`    .;==|==;.     :|=||=|",
    r"    +QmQQmpvvnv; _yYsyQQWUUQQQm #QmQ# ",
    r"    QQWQQQQ      _QQQQQQQQWQQQQ  QQQQ ",
    r"    -QQWQW'    '- -WQQQWQW'     QQWQ  ",
    r"     -QWQ      .    -???-     _QWQ'   ",
    r"      ;QQ,                 ._QWQ'     ",
    r"       -QW=.             .;QWW'       ",
)

ALPINE = _logo(
    "alpine", Color.BLUE,
    r"       .hddddddddddddddddddddddh.        ",
    r"      :dddddddddddddddddddddddddd:       ",
    r"     /dddddddddddddddddddddddddddd/      ",
    r"    +dddddddddddddddddddddddddddddd+     ",
    r"  `sdddddddddddddddddddddddddddddddds`   ",
    r" `ydddddddddddd++hdddddddddddddddddddy`  ",
    r".hddddddddddd+`   `+ddddh:-sdddddddddh.  ",
    r"hdddddddddd+`       `+y:   `sddddddddddh ",
    r"ddddddddh+`         `//`      `+hdddddddd",
    r"ddddddh+`         `/hddh/`      `+hdddddd",
    r":ddddd:`        `/hdddddddh/`     `:dddd:",
    r" .yddd/       ./hddddddddddddh/.   /dddy.",
    r"  `sddd:    ./ydddddddddddddddddy/.:ddds`",
    r"   `yddd:-:ydddddddddddddddddddddddddy`  ",
    r"     `+dddddddddddddddddddddddddddd+`    ",
    r"       `+dddddddddddddddddddddddd+`      ",
    r"          `+dddddddddddddddddd+`         ",
)

CENTOS = _logo(
    "centos", Color.MAGENTA,
    r"                 ..                 ",
    r"               .PLTJ.               ",
    r"              <><><><>              ",
    r"     KKSSV' 4KKK LJ KKKL.'VSSKK     ",
    r"     KKV' 4KKKKK LJ KKKKAL 'VKK     ",
    r"     V' ' 'VKKKK LJ KKKKV' ' 'V     ",
    r"     .4MA.' 'VKK LJ KKV' '.4Mb.     ",
    r"   . KKKKKA.' 'V LJ V' '.4KKKKK .   ",
    r" .4D KKKKKKKA.'' LJ ''.4KKKKKKK FA. ",
    r"<QDD ++++++++++++  ++++++++++++ GFD>",
    r" 'VD KKKKKKKK'.. LJ ..'KKKKKKKK FV  ",
    r"   ' VKKKKK'. .4 LJ K. .'KKKKKV '   ",
    r"      'VK'. .4KK LJ KKA. .'KV'      ",
    r"     A. . .4KKKK LJ KKKKA. . .4     ",
    r"     KKA. 'KKKKK LJ KKKKK' .4KK     ",
    r"     KKSSA. VKKK LJ KKKV .4SSKK     ",
    r"              <><><><>              ",
    r"               'MKKM'               ",
    r"                 ''                 ",
)

REDHAT = _logo(
    "redhat", Color.RED,
    r"            .MMM..:MMMMMMM          ",
    r"           MMMMMMMMMMMMMMMMMM       ",
    r"           MMMMMMMMMMMMMMMMMMMM.    ",
    r"          MMMMMMMMMMMMMMMMMMMMMM    ",
    r"         ,MMMMMMMMMMMMMMMMMMMMMM:   ",
    r"         MMMMMMMMMMMMMMMMMMMMMMMM   ",
    r"   .MMMM  MMMMMMMMMMMMMMMMMMMMMMMM  ",
    r"  MMMMMM    `MMMMMMMMMMMMMMMMMMMM   ",
    r" MMMMMMMM      MMMMMMMMMMMMMMMMM    ",
    r"MMMMMMMMM.       `MMMMMMMMMMMMMM    ",
    r"MMMMMMMMMMM.                        ",
    r"`MMMMMMMMMMMMM.                     ",
    r" `MMMMMMMMMMMMMMMMM.                ",
    r"    MMMMMMMMMMMMMMMMMM              ",
    r'      `"MMMMMMMMMMMM                ',
    r'          `"MMMMMMM                 ',
)

ROCKY = _logo(
    "rocky", Color.GREEN,
    r"        `-/+++++++++/-.`          ",
    r"     `-+++++++++++++++++-`        ",
    r"    .+++++++++++++++++++++.       ",
    r"   -+++++++++++++++++++++++.      ",
    r"  :+++++++++++++++++++++++++:     ",
    r"  ++++++++++++++++++++++++++++    ",
    r" `++++++++++++++++++++++++++++'   ",
    r" .++++++++++++++++++++++++++++++  ",
    r" +++++++++++++++++++++++++++++++: ",
    r" ++++++++++++++++++++++++++++++++ ",
    r" `++++++++++++++++++++++++++++++' ",
    r"  +++++++++++++++++++++++++++++'  ",
    r"   `++++++++++++++++++++++++++'   ",
    r"     `-+++++++++++++++++++++-`    ",
    r"        `.-/+++++++++++/-.`       ",
)

FREEBSD = _logo(
    "freebsd", Color.RED,
    r"```                        `       ",
    r"  s` `.....---.......--.```   -/   ",
    r"  +o   .--`         /y:`      +.   ",
    r"   yo`:.            :o      `+-    ",
    r"    y/               -/`   -o/     ",
    r"   .-                  ::/sy+:.    ",
    r"   /                     `--  /    ",
    r"  `:                          :`   ",
    r"  `:                          :`   ",
    r"   /                          /    ",
    r"   .-                        -.    ",
    r"    --                      -.     ",
    r"     `:`                  `:`      ",
    r"       .--             `--.        ",
    r"          .---.....----.           ",
)

OPENBSD = _logo(
    "openbsd", Color.YELLOW,
    r"                                     _    ",
    r"                                    (_)   ",
    r"              |    .                      ",
    r"          .   |L  /|   .          _       ",
    r"      _ . |\ _| \--+._/| .       (_)      ",
    r"     / ||\| Y J  )   / |/| ./             ",
    r"    J  |)'( |        ` F`.'/        _     ",
    r"  -<|  F         __     .-<        (_)    ",
    r"    | /       .-'. `.  /-. L___           ",
    r"    J \      <    \  | | O\|.-'  _        ",
    r"  _J \  .-    \/ O | | \  |F    (_)       ",
    r" '-F  -<_.     \   .-'  `-' L__           ",
    r"__J  _   _.     >-'  )._.   |-'           ",
    r" `-|.'   /_.          \_|   F             ",
    r"  /.-   .                _.<              ",
    r" /'    /.'             .'  `\             ",
    r"  /L  /'   |/      _.-'-\                 ",
    r" /'J       ___.---'\|                     ",
    r"   |\  .--' V  | `. `                     ",
    r"   |/`. `-.     `._)                      ",
    r"      / .-.\                              ",
    r"      \ (  `\                             ",
    r"       `.\                                ",
)

SLACKWARE = _logo(
    "slackware", Color.BLUE,
    r"                  :::::::                  ",
    r"            :::::::::::::::::::            ",
    r"         :::::::::::::::::::::::::         ",
    r"       ::::::::cllcccccllllllll::::::      ",
    r"    :::::::::lc               dc:::::::    ",
    r"   ::::::::cl   clllccllll    oc:::::::::  ",
    r"  :::::::::o   lc::::::::co   oc:::::::::: ",
    r" ::::::::::o    cccclc:::::clcc::::::::::::",
    r" :::::::::::lc        cclccclc:::::::::::::",
    r"::::::::::::::lcclcc          lc:::::::::::",
    r"::::::::::cclcc:::::lccclc     oc::::::::::",
    r"::::::::::o    l::::::::::l    lc::::::::::",
    r" :::::cll:o     clcllcccll     o:::::::::: ",
    r" :::::occ:o                  clc:::::::::: ",
    r"  ::::ocl:ccslclccclclccclclc:::::::::::   ",
    r"   :::oclcccccccccccccllllllllllllll:::    ",
    r"    ::lcc1lcccccccccccccccccccccccc::      ",
    r"      ::::::::::::::::::::::::::::         ",
    r"        ::::::::::::::::::::::::           ",
    r"            ::::::::::::::::               ",
)

KALI = _logo(
    "kali", Color.BLUE,
    r"      ,.....                                  ",
    r"  ----`   `..,;:ccc,.                         ",
    r"           ......''';lxO.                     ",
    r".....''''..........,:ld;                      ",
    r"           .';;;:::;,,.x,                     ",
    r"      ..'''.            0Xxoc:,.  ...         ",
    r"  ....                ,ONkc;,;cokOdc',.       ",
    r" .                   OMo           ':ddo.     ",
    r"                    dMc               :OO;    ",
    r"                    0M.                 .:o.  ",
    r"                    ;Wd                       ",
    r"                     ;XO,                     ",
    r"                       ,d0Odlc;,..            ",
    r"                           ..',;:cdOOd::,.    ",
    r"                                    .:d;.':;. ",
    r"                                       'd,  .'",
    r"                                         ;l   ",
    r"                                          .o  ",
    r"                                            c ",
    r"                                            .'",
)

ZORIN = _logo(
    "zorin", Color.BLUE,
    r"        `osssssssssssssssssssso`         ",
    r"       .osssssssssssssssssssssso.        ",
    r"      .+oooooooooooooooooooooooo+.       ",
    r"                                         ",
    r" `+++++++++++++++++. .++++++++++++++++++`",
    r" /sssssssssssssssss` `sssssssssssssssss/ ",
    r" /sssssssssssssssss` `sssssssssssssssss/ ",
    r" /sssssssssssssssss` `sssssssssssssssss/ ",
    r" /sssssssssssssssss` `sssssssssssssssss/ ",
    r" /sssssssssssssssss` `sssssssssssssssss/ ",
    r" /sssssssssssssssss` `sssssssssssssssss/ ",
    r"                                         ",
    r"      .+oooooooooooooooooooooooo+.       ",
    r"       .osssssssssssssssssssssso.        ",
    r"        `osssssssssssssssssssso`         ",
)

ELEMENTARY = _logo(
    "elementary", Color.CYAN,
    r"          eeeeeeeeeeeeeeeee            ",
    r"       eeeeeeeeeeeeeeeeeeeeeee         ",
    r"     eeeee  eeeeeeeeeeee   eeeee       ",
    r"   eeee   eeeee       eee     eeee     ",
    r"  eeee   eeee          eee     eeee    ",
    r" eee    eee            eee       eee   ",
    r" eee   eee            eee        eee   ",
    r"ee     eee           eeee         ee   ",
    r"ee     eee         eeeee          ee   ",
    r"ee     eeeee     eeeee            ee   ",
    r" eee     eeeeeeeeeee             eee   ",
    r" eee      eeeeee                eee    ",
    r"  eeee                         eeee    ",
    r"   eeee                       eeee     ",
    r"     eeeee                 eeeee       ",
    r"       eeeeeeeeeeeeeeeeeeeeeee         ",
    r"          eeeeeeeeeeeeeeeee            ",
)

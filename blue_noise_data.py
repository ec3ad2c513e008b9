"""
Bundled blue-noise threshold tile.

A 128x128 8-bit grayscale PNG produced by the void-and-cluster method
(gaussian sigma 1.5, toroidal). Ranks are scaled to 0..254 so a fully white
pixel always stays white. Regenerate with misc/generate_blue_noise.py.
"""

__all__ = [
    'BLUE_NOISE_SIZE',
    'BLUE_NOISE_PNG_B64',
]

BLUE_NOISE_SIZE = (128, 128)

BLUE_NOISE_PNG_B64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAIAAAACACAAAAADmVT4XAABAkElEQVR42gD/PwDAAET8siuc5odg"
    "KpFqDLFzVI/2a8ibg90vlNOwEXXDThelCjj9sJlS7KDDSdaq98BmBqvcE++iumKNsnXEkNPyhasT"
    "Zpo+h+yXuxNQ4597L1jhc5U9oUn9YL4Zlw2k+8cwnh22OxDoiRTDlmS6oV059VF54IyqT+WDr2BA"
    "F2o2TJASAKRlGFXGEjm570zJ+UbBAM09sQ9bI0W3ayFNZuoisvduwNZiFNw2H2gyFZIsck7gkSpb"
    "inImfcos5xJCXqcrbM3rMbnRalUGO/ezhwhOyhm3DfYh2LCEMqV7Z9hSOpTpW9Bu/ZUuqlrgB/kd"
    "TYIU0pwHt2Y1vxyXLMl9n9e5BK/pADHWf/GOZ9iiCXacH4Qw73wh3If+wXrvAaLivj+dYDOSSYMr"
    "uneMz7WA817IDKQ0dsj0PtNN6BVHaKHwfwK9Uh6RegT6Ha7ki3MuY9Sq/W6cRsF8YRfMDONJ9Su9"
    "bx6CCq4pUcly2UBvrTx4xOizZzDuSh78eNlW9gXgUSKE4HVUAIy7Az61JU5/3y+3Yt6WZqtZnkcx"
    "pxlUx4IteBSG1QLlHvOhRO5dA+FQptpAhunQFJ0Zu6UBkq3Tix/HMuOY/kHGWqNLfirJSacZ7kEh"
    "iTjWWo406plSb8UfrYYE5qrTSnbkiAWzGZspy4rbLgGSRsp1pNOTCT+1b48yqf5gLMcbAGpH5KR0"
    "zP4dXULTC1HGEzjoB3TPY+WZO/lR0av0RMZ6sGYIzSKnP5AmDnCbImNIuWhSMG3+XjZ291awSmcW"
    "d7EP6TO+3Z5eENzAk3fDXgHxH84Is0D2jDeYXMw9kGAw8pwX2ERj93/qVhZfoHL8I4kWWSy9YKQk"
    "z0e/dAqTQKD3ANKZH14yDZu/ke6Ao/QpsdWLu/MkjwlytRqRC10scJpSOtSHVHHE9Hay5jfC8a4D"
    "+oDmzoYh28AMLpoJz43dNZ5jzYsXaz70hGkzVQ/qlbN5o2fjcyPUALjpEHfzTLcQwjpbuKAiwEwE"
    "pL3yQ9NYp9226npI8YnmDWLwH8204lkLADh6vvXWg0NpAbAmbD+Od0hpG1OuQcou2mXnoMDgG7kZ"
    "4p4u55URMVzKSIwXUnWTPCOXC7NBn1CC2WPteiS5U9Yndk/ulQDCJbX5ntdLMNtGK71OkqpYgGhG"
    "1y6lG91/Z5T5LHjmjTbebieQDLczEmZABI7ZFzZ5rpY5h09pGIKtAOxSB49Mq+3KN1bPEb/iA/wv"
    "n9x96lylhkgkcjyJV/d9DF+9G7BM2poG/man1S/dtcpGYu10EPKvPb8Ypz7yBIX3C7svrthSkEUI"
    "eyOtbhPHhg38NRa/8SWuj1LGapkp5wGCyFIKaLDPgT/iZIjLe/CdxSavaMNR1RborNcw8cQnAGPa"
    "ryxvESd74Jj6e0+dXbiIywkzmRf1DM6u/QbVrDXKkO5Fd/lohSGrfSfGDIRcFW7hoDLTjWUklnVO"
    "312YaqxGm9p/WyBy66jRWcSH91Pqm17Lfd+ZPM8T7HwF/jrTUbFEHdWo8ysQVMmsIPZHrSpTcPs7"
    "nwj3L2xLegycd0mVABeFQcnot1GiFWYrrBrTNx/qTmXCc1C7ejVblEx3I51JbCSiyAEyu+w+3laV"
    "5kn1pooEV7wXS8HcBPwujMAb0izGYDoT+YnMNxpr6T4NoSJ1O68jR2cGVHWfYimvh1u7GZ/ta5g4"
    "XIac/hiWOnID3JPPDIZc03WMup/HJvpdsADQAKb8IJhfg/jFP4vBQ+WCZ6l4FqT4H9ZBoePBG+u+"
    "YegEstM4iVyez1NwFLk1arIgOMbvKnn6ojV/VLTQDHs55n8R6nK5mUAKvZuDL7LdYLvWA+KI8KfF"
    "ifo2wNpC5A+PdMYwh98UxOJBuXZc6rWLYh4/47YX6kMhWgPcjUbCNO5tADlYed0NOBxc2gXucZUI"
    "9sVD44Y8sotlKABrhTOXFM16/FkR2u4eewuX0oD2AI/RfWVEsZJfzw/ommhBo/VYnUmvjybcUazt"
    "Y0r+ApRHfTKRS2zAEDDZH60KT5MccMo1918GVLlJeQJnKdsJxitP9MB4oE4xlbDO5T1mrRbkhCK9"
    "AOkHv0im5ZCvdZ9RIMsxVI0q0QNY3A7vx5j1RrDfU4s6IJStcUuqOfmwSiGkROFUEaPXDeEfQHGw"
    "KhfrcCTMBW39PcMDail62CS302XnFcX6rCBYm3dcROJu0X/1o02tIpzP7ymV9q/UjadKfZ/UEakp"
    "Z+/IYgpunIHxMXWgX0ySAH2e1iVvxEwo9DW0ZN+huxhesXSfLHurT34syRFoJafCauFCJ7+H22Yu"
    "5mHGci6+/SeHb1G3hfNMzYa+UbOC37sdW32g5saPEKNVdh6qhlsMd+jPP/i8gpkZtCtcBddq4UaB"
    "ba0bYDBPFvc14xZtQYTQDo0jf/pLLA+6VdIFxt4SALo0YY7vAWLTEInGDYI+deiY/kXK62A6FdVc"
    "oHfv0Ej0C7d98wVbGch/BpHxD52AYa898Z0vxwKUXuIINpQVYDWkze5LFzta8jCJyTzzKtJAniyK"
    "GKQJKvNjP+W+li+HD7gYOdaM36HJhGm/W4+z31n9SavZPL+o6MuNH/6IPKhmAEr5FrE8g7ecQWzn"
    "Sfol0AttMxGNHb+W+bYI5D6SA4FfmjFXx57kkk6ovzlSstkWS88FwhjoZaUkO3ii+MlG7o5zCS6R"
    "u3TRr0XmDZxPuZDtYcdS5WjVU8mnjhR1SOvFW/mYw1MFQXMN6yaeG+8vBpo0wnQBXJATczhiskdv"
    "Ju4cAMmH31DRHv543K0dkKRarU2/31aybtxNJHGMUborqzfTF9uLHTpzJ9UTdeMgaYoy45dmjlR7"
    "Qtn6uNUdVnGqKNNR4bJf+yaYBGy6XN57B2wepwJ/szmSeDUA2lr9qxo8pXktZ+OB+r5br0jZgVHJ"
    "drhnHeKf8SnST6LbDJvXu5F1AC2iC3OZWzUSVCtg2AN374gqoYH1PQODrzfbHv1lxulwpUb7a7Lu"
    "pEH+Wp/NQPi7eB71Nt+zE4NVCmmOLt0Af74Um0SEDt5RgvcfkC+r/DvC4knXH/QRw+2DRcIphW3f"
    "AkrtFrEqmhw4z3UBrTyV9RToiFRAumuF+SKA7C5bFVHbAENkwifqq8qNufV/vTbIFELUCGQizaJc"
    "78hnpn4UTIkkWbwAzkwMX4u5Lg18qgNXn0S5cSaTzjGbrUXou5lf9T1m8iDYa6YsyqBA12gYzFl2"
    "jTBuoEKsYia1ap0KzlKQudeHo9BHY9iAlSz8aeEjXkSrLJjUFjewBsE+Z8l797MCAKp/9jyEDm7j"
    "PQqaR+ZmlLZv7MJLjOUvGJMLQtab8Qmw5Hs2m4fdxBtr24/tYcgp6Q7XqQZd7GzEIc55EkKvHpK2"
    "eMo4u0jsYRJ2vk3khSa2FPm9WIbaS5oY6DjerzP1Jmg3WQh78qkJ5E2ixg+8ithvxQt47JFf4VKT"
    "sQijOYjpAMgcVrDZTiWiWtNrH6ct+R1SkTavDGy5elTnv1szdcFAkBjrXCAzffA9rkwcNZRwzmOF"
    "TP67QQ598Fw1/IPaU+YwBVidigh8rzfoowCWQaXnUJcLzCsE+HHSUJBzXxKhfw/Gj+S2JD1YuRlh"
    "Nn1ToQM3+1mkRscloHUb9E3QIlltADTVigVpvPqGGrLwhNZYfaLXJ3n8WdlA9awuhiCr3mQo1GzG"
    "p/i0TZ0D0XXfs/dIrCE3mnotouBNlAOkwShvD8WIrN0c8cMkzoxYJ/RxyA5p0T957WiziTK8Cfoi"
    "xedO1Kz9Qhtqk8p09oXck/IpyeeBsiDcbRD2PNjDM26N5aAOAJNJpu4yk0LPdDRNBbsTQMQB6J4T"
    "xoccmwHUaO8RklD7o04PPnMLaMqFJaBWCIAXje7D3xPVZYsot91nSZfQpUNj/klyNWZT+wrWg7cy"
    "Vvcjg7IdnzfkFqJeeqhHfZY5cSpdnNJP7Q6fJUOuGdFCaxtfQY3AMYG0ZACEq94RRLb9AGLeHXjM"
    "F2QH66bKZ5DlrWCJS2o6pi1SznNIn7w+zgeEH7yJ2Za95yxf+z7AaNM8vFkAbVGyG8b5PHQg7Qpd"
    "6SN+E5Kx1oenQZltRxjairScNeBXxkp30UDqxy7ZAbsY8cEEeDC9gzbUZ8EFXHe5jK3M8wdV45ZK"
    "55xVIF++gSV2AAu4PVuy6Jy5VYkk/TJ0IPMvzLfgX/KyjDb8HVV8rmviO2bwLVgbQKbZD5XmLKbq"
    "dC2oivA7glcIp4jXsXw3jbvXPMcrAuYYvizF6qtpCEjVZAL+ig+vWiGTD1WO7WSnUIHaqucVYrBM"
    "7n/lpiX9CU8smGirIsoMeC3V95k67VLHAC+a94cnTnwy2g9HodhRltN6DpIegQVp4RG/j9oU8yuX"
    "y6sFesn2dY5PtG0ci1IKlvtCzyac5mzTShhYLsn5UQWdbupenk5w74APWTqU5Xwav5RzJ9qY54G5"
    "9HCwPyTdkjwgZUiY9wOOGjCXUNY9nuh10xrqcjv9o8ZID3TOBqTkAIBnwwOg0xL4lHLFZBmzBkOm"
    "WPpIz7wpTKRfdjCeXr5NGFrko0quCM4ifvNJzN5kxBRftXYMuSyOwfOrjxNvpyrzSxC9e884sGHT"
    "o/wlxDjyUapAwWo0BEhkN9EWhsh0Cb75iMwod9i8YMtwFbt8ZBe7N4VNuYtaFme4kSixZIxHAM0W"
    "Q+ttN7xgIbbrOoP1wmniKrBzNZjvhNUg6MRD3wF9+JA9HooyYe06wQGpNoEorHvjHVD4RN0Sejdl"
    "5Ea922N/roww+B6VCUiMHHpSrWeKKeIS8FW1+simJJdO+10w659WDbU/pVY5n/hD6Y4u3qpa+aIC"
    "1Sew3DSB8lbfNPoeAKDhjVmr3otBpVEA0Z5XNIEVyYwL21RwCTuvTw5uiq0012280nDdtpZX4GeO"
    "vA7nTTiT1aOHYqyYU9YDnCmFDzjRHOBFpGffu/Qw3bkE2Rii0GJ+nB6NbhXaf+W9D5q0RGsm1nDl"
    "Ge8LhSOtAFnMDYJAH8hl80V0k+kKQKUXcrlUAG82sw8peQvtzHiPKWwN1ZTvPFzsoxu2yJXxgKH7"
    "IchhnSgJVv4QKYIWoyhQ+XOeyPIDbCnLCDb2ILZ1x/Va6Ja4WXPCB1SEI3GfY0CSc/hJDbc2y91F"
    "LZ5QBmAzd9cci+OtOJVdh8Rt11PFeaPuS7/lknUynBDFIE681H3IlAHYACfvZMz9Ur9nGjX4p+K0"
    "TSWlcromgkP+WxhoKtNYPukNSvCujkSfyUHzccXZFj1eHoRavUHve8Rs44wwTBqscUoA/CaR6qw2"
    "0VHBFO/MVzGC6pZUB3av7Hq/95KuSPBZyhB98wHOJUaxMuORGTZpkCpiCbfiVoHuX6BwI1w36USG"
    "AMMTl0KDozGY3rRdRRx7/GDFAkrSaaovi9hGwAi2k3Sphs5yLcB6ZNasBkR+r5DXuTKp35Qfrk8W"
    "Q6he17uNLcmggz7Tahn3lQXjiSuoHMaxbSXA+GIXxzgbaSrRCoMopT1fv02o/ph6FWVI+8qsFPSi"
    "0EsjqNM7swPalfMOrWGkAFB7uiDaA/JNhAvSisUymhPgf/STDujLA3nkmHEv4BnBOBJe7QPhG1Mz"
    "keZiK+0Hcf5LDnRe1pqC0A7+fAZC8xTcY7UNS3+2QneqSmZ85ZQBQ96FPaOOTt+GtuZXnrxp6ofc"
    "HHgzWgzA8aG8KXRC01N4Nf6EDW8njPsvSrWH3CL4ANM46GtXyHYhqD9xE+tnvkeRNyGvXT2bUbgf"
    "PPOJTWf5Vd63kz2qifp3vR+ex1hCmRmMy+w6AfMruXAmneZsqH1QMeiaxt0hZM8x/Qq/O1TuZJ8R"
    "0yvxAl+lRBN7Nv1FBscvlbPkiNhDLX8PjN4FiLsalrJdvexMzWV+xhtqO3kIAF+iDq6NOrZk4r/2"
    "l0+tJtFsuFTXe8EcafioXbIT2KEqmHwZTM9hLLUT1E/1DoXUs95WKaaGvEVb5ZRSxzFYziS8jxl0"
    "L1al7hG3jdedFnfLIbd8W69vvdYg9pHC2R2XsFNu+AhmIatsz1npTrNn7S7gawE+25YbpRA/6VSf"
    "zruWACOF+yzfEe6PBlkkOdsNhegG+J8RMPCK0zKCBs1tQb0AzTWn93cL5phAaos3b6glZDZ7wWYY"
    "222oCjzdE7KDDOFp8ESs+wSROH5VIG9M9auLN/xI5x1BfZcybE8LcFuA5xWmRtG+OuqSAqXEOJsi"
    "V6BJx++NLnhXu+OIqAT3KkrmALU/xVF5pUot1aCCt1x0pjJbgEHiYapHDKBO7ZMn73eKW+lqJo7B"
    "UHLuALHgwkf4A+mfD/RPkyL5gbVjjkP6mTqjCNFegr1s4MSi6TjKKV8I2GsNwpzSE1XkyafqsyzA"
    "O9R6J4xUfBRM+yh2GPfLg7gVf1WrEtP2OG4kwnZeixB0ANUBZpwazWK6d0foFsj6RMKYGc2LuiR3"
    "5r9wG7hUpxbVQrgJ2K452yPFol4qEpZ2yIs+1S2tx3c3zxnpc9YoYshRhLoeOdkTSSZnAoK1keZE"
    "sZh/MV+K+bIFgB87mfcAjljtsQ70osu0g1/ckGlAB/A63CLDRWibCZJP3zfSs+9YAKTzg9048Ygf"
    "/Q2ubC2KCdtq7y1wAPyYVyneQIPiM2b9IZuBSV8WnX5UNft/0FiuH1C6boVA7AVan04sogS3fBv0"
    "Km7tk1Oo+I/RrPBWFHnEJ1DzptshO2ifSuFle0fPah2bNddfImsz00KsDr3jWpdvpl76hrQoye6u"
    "EZ0fQpYwAHlLKLhaBaw/y1mQQdifViS2RqjGUDrSFYmoz2MSx5KuVcsz64v5uA7pkhm0QfEx5GgK"
    "+psVY7nfjL/zW8tI5a+T1kmhF8p+Ml4cQHIk06Jm6xjKAEl2yOwou4wMxySh5bpNccBBj94GmBzx"
    "UjB3sCrNDJA0BORSfz5ihflpgMQYAM6vEY/HeOFmnTK/8Bmzc+eCDF7fnH61avQ0Bpv0fT4Fb+IZ"
    "c8UtaD7KcNZkjgdzkdOqJ1Tjo38oDj58FpFuDzxcALMw5XAH6rDfmchL/AY4k3RZjOisEoNU2DXy"
    "rFOCMw/9iAjrrk71cMR+ndCMFPdOuel00GSjE9krx0rWDOhhADvgavZJL5UR7XcGYoJJyzij840X"
    "KuoKSsN8WLxHI9/Chka0oQJP44OsBUon3qfDE0s5wHPPNEr9a9Ss3jP5oofGdv2LYELAiU4MejGo"
    "i1q53KkkuzRgmcAHcZtcE+rUZZjMK6NoFn+6PF0p4QNF3WSEPBifSCG8/XC2AKEyt1GaAAeJLZ8a"
    "0VS5Jc+h2yn4CGUfw0ByylykI5jpG9t0s1mZFewrXNiWsyNXnPC6fzVb6qCB8QCMHbTIkFEeZL1T"
    "0yzqGFXIEdyiImq59hNk4yKAEEL2atUb/UHgsyHEfkActkN7WNw7yi2cC+2pTW21lhqn4FrE9JY1"
    "hE2UXvN4jyf+AHfAWNuzgfBwQ4tSN7qMnNx7VKrkNoT50TtjqjGQCvoy0WeP9jx5EPvRMXgWT/4f"
    "btkWY6tQ2mEIpi70mhGAHmioQJomr3s08s8+iNKzOsPwVM5+CpNOfSdmikr4lmqi4QjvHrOG+VfZ"
    "dswaif0jyzTBeSqHDmvOCOom0x1E3WatAEvsEj1kAjWj2RSu53AdTbYu/gOSvBBPcI8BzFHjZaR8"
    "T60JviHLZ0KMX+Ojy5S1PpAsyjzpl3k95HKFyj+z4Um+hd5u9EiSA1igHFBzAZppLbCdOuWvy6Hw"
    "FtU1AtEohV7BkUsBb6odRZRfwzl7VvFoAeuvROBYqj+gb8ClCskgANagbov6mcUeYvx7BFrO7Q6I"
    "z2wmYKfcHL3ygyC/QRPIINpzS4jlosQargw/ZwJ80FX3tnYRKPavFtFJAetvlBTxBTbPDmHLtHHm"
    "Le6k2EmI3xtcwyVvAzVSsHSkWb3tSqg0ad/FKY3ksjHcB7HiD45FmdI0dZIaw3vfD1SD6j6NAAQw"
    "u88nUud9vEoxwIc/qGQ6nknF8T9+LqlFaZ7ucbTxizvpqV8NK1TwctSI9DDmHKMIh1qkzEuJXCm5"
    "YKQiVdF6Y6xSiaUn3hSPw2OEKPUPvXb4R4PtYN6Gxw/jiz5xDc36FZg58k8KZvR6S5JiqNUgvlIT"
    "77Ut+Fw0kfErarpbAHz1SBmucj+RD6nTlfQmd8LfF+t4CZXL5lkP1jULlCpMZJ4XL/i2dps6vilO"
    "sptcunFG6jDgbQTD8ZndizT9tjuiLvi/Gew8gU82qQpCx16pOJYFz6oVu5keRGUt/B20moEneLxc"
    "pNN+xiWjGe8oPH73bamEX89MixW01UipEZfhAKxhnIDeB9cv8VchaQzXmBFQr44zt1IXbJH7fLZc"
    "0n7bAMR61JBHzd8EkGXdE3hB1iXIlhO9P557HDxwEtN1B4TnHpJEd8ZpnO/SePm0GnLUT+hsNJFX"
    "P3nv0p+7eVTUOVvaTeUNdBw/nVm+1m60ylcGOOUlmgRxp+VlAn/C+jkiAMcONvBWpsBhnXnpQbRY"
    "NfeCYB7WaferO74ooUTrHKc3/a5WPAhpIIVZ+6kjyO0Mj/pgr39W/CrRUq3nVrBGwFrMbbUB3FYa"
    "uQVgI02M5J0rgx633CL7xQgwb08E25AS870DrI4vtOeH/AQ7g1IOmd+MukjE/j/bIzuZzSVXc9BN"
    "AOqGvm0YRIgfzgG9guJxq8Yn47xDmyaE4RJV0ARru1GKbyOW7rql8jOvFENviFCoNHwFN9UbibVn"
    "7Q6EJJXtLI0TTOKBKaf9M4zDoNwwWQ/+xV2iTYBonuCvj/UnqWcvoGyFP/dqyVUozmuT5ib6czAe"
    "oHoRWK+BvPV4ReyhFpBoAECiKdWY43D6O1CjLhqTCEdroAB63QxNym+O73mWL94L0EfgYhR7TMFy"
    "z5XgMMBi27RS8XCo4glEkMI5z2IL1qf6Np9iy5FKctdGFGvJfrJGkwfyFsw4EVpDF8GBP+7ISeIl"
    "0hlHmQmpRbUSx6lBt17zzWbekS9kC1UatIg2ueAFAHH9El2zMAqskd9jyv1S0O2KPfpTwGbrny60"
    "PiHJ91+duBiFMcrenAbnIV61APYWlCHLnEYoWnnYLaVx+aF8QF92xw3yOxTkryWB66wA7jZo2XpB"
    "sZLpuIfQa+JZsxt9CZNZpLmC7WTXee80Y30C0IRNCTO0HO/SjcbgagjSXievAFLJfT/yg1TFJ3cQ"
    "iz6lexW3Ic2UKrA8fgle16dLEHs97WvCo1ckQGaJOvJMn4BuQ+N4FcHqlbEe710CSx+85Bm3KohU"
    "vH1mB/ZfN5VRjb8ZoCjibFQdcfQonTcKlt5hu/42dwzcIjiMGVeh2UqW4xqslOxEbKNLIp0xrPtK"
    "eueYANkxt5MPy2rnRrvqIrZmMd5cpnERgvUd0bz9FGeLw64ejU8D8XSS/s27pngazznpu1wyjmME"
    "O85QgrvliswzkFGa62vbJKPNUJy30x/jK3T2TseKC9Q0p0oOu/p1zUwypx3H6WVQxZz5vC2GFfQr"
    "ZjrHcNaFwQB59kGDWyCMvjwaAI0AZeVLqCCPBZ5WctYDw4dI6jfVRZpWbZRJf98n8FfSL7TcOxyy"
    "DFAtD9mQY7ElnQf8qduA82wNmz0YqFpy9RLSPq4DjUPgLoUPSnqwYNEGqV85+5jCftdli1OoJoru"
    "bYRDkSuydEQAZ+XKq3LBpvFVJxJZLemuYNgX5cqgC/BuAMT2oih43jn4fs8z8pdO9ySZBrlhrdsE"
    "5jUho748bg2g+12YgNVh4YVv61cq+g1T14PFSSJToDHF/nPXLOAIsWOBIE/G/HIYv+dtxPIMmjiE"
    "5Rq4diRYAO8tzBZB4wLFFFHUBaH0FdKpfU4MPlcbfwaOtvye0Yw4EL2nc0YuYadHAHw6V9AVuFWk"
    "YxyuRBl5qmjaevwbdizFgq3uXAGV5YZEeAoowEekNreYP8Grg8qUaj0Sc7jSFbGHIWC3f0aUyzWm"
    "85ZgMrJYmkEfkjFX4LZJbZHZRqjlj0Osd+q4clmvk/azed04iVjgM7aU/dSa6EXdeT1oGk/LbJBS"
    "A/KA3s0gALQL64WYaArWLuRqibzmDD7CMZNX5Y5AYxHSdslSrCu+4Kdr9RN5I/gJ1B1tSDPuHOGj"
    "7DSPWuM/1E4LofcfUOcKcNgShOkIefdf2qmAFscj8jIJYcQXb74Rk1wrmdczIGQ7HFNsxCmYGOpp"
    "Jng0YMsrowzZsXvnJ/s1xJazEFSUANxjvkUr88KITbgHzS5d1aFTFLVDqA66+UyPOSX4EtFiFj7P"
    "Uozmw0lce6HyArp3rk6IZBv5fAJql8DoN2jBeIy2RS2rw0XTpDO0BEj5cJRdrc2c9oI301X9OtIL"
    "90WA5qHG6ZS2B/pizYdGwgS5qRNvxFnulEIGo4HbYyI9a/wyAKF2HajNeEEa/Zl860iNHILw0XDs"
    "Jc9ynBq05KBpfkqU64WuLp8Ca66N4jZYl9lcLcwF2rNAx6P0GnsmjqwB1iNcye52I2SKHMpyjc0i"
    "POgBfkRwIU7pnSiEqG2xiBfMbEoJfS7WS6Z5PQul2YPyUZH5R4QxHshiu0gSoex9vooYAD7wVN8C"
    "WqCybzRYIJ35s2QomgZchzhV3C6AWge/3TS1InIO8GHbO9IqEbHKI4cV/Jo4VpdxIlE0tFvZSu9f"
    "PfyhDo5PnvU65VMU51y4o9BRwBLft5ITsmcJ4CJPwV2cEbr7YK0ThuQcsvVUZBo4ciPYAr2oc/eO"
    "1yV0zVEJ5ErMAAaZgTWT6yPVC+HGrGwBOMpMfr7Yo/QCwWjryEeOG6T9V9fERLyBGZ139kNy7Eyq"
    "acKB6xHWsN6A6wnIdBSZs4Iya+MZzACxbZe9LoMLaCuI/KMvWM56MvPBQJfoNfMp1os2mUfwbjFc"
    "xpIs5py94Kw/mWPoUg42Wa/xLo+mJWKtAG7DIrZoxTuGZZEVQt3AeeEO+zBGHXatk0IQminzY3YC"
    "ii1qkiRY6ku6YpAGvTTjC0ciu2UxiQxim0CJMLzhHFPau0CuYH/aIUL+oUvymeAaP2SL7ANH2o1T"
    "c9MCaH2uU3Qf28Uku6HcQxR8y0WIDVp8zhkq2p555QGGXsA72oT2AFXjRPoUfE3wvDjzYYgsVJOm"
    "abGOYuJNJfxy1Va0P9HAS+iiB/qriwjeItOlX32WzXX1kk2q/UjAJqv5ZJFHe8oJiCT5ljJVw3YH"
    "ZdQ4wFVzuNIfcZ67Yw2rHoa7ohvdPOq0BmmOVQKKcemsCmwm8MMw9o61PsMhqEnHGfpxuBUzAKQL"
    "j1ep1AejJlfPmwqw9R0/2RLtwwvPh7YcqIMJ5iuVFbY6y3QzxmyiO1P6FNcoWbE8AORvF8515lMc"
    "0QftKmbypHVJ3Rqp7ordsB15DoyqBfRJsTn7J8TgOPlXRMSODJ9dgvc91OwgwS5Q/rTYS5twC0pr"
    "hl/+kWrgQpgHTJXNACXZdL8fiWLfc7QceudHb8WFWyp5PaAwYOFQOe9ooXxZ9WWCU+EbRvISe8ct"
    "iUryDpzYgcYrojeSA7iBpFvCrZY4WNIFv4lqDj0pU5XN7kbkNpN7yxdsl0t5n2YQ6i9r/km/MJsQ"
    "qntLp2KZgDZhixu61qHsB9QWOLknfrDcZ+x7AGCzM+hA8i6SEvlKwyTVoBDrqc2ZWLvzfgqUvyPH"
    "GEPTqCHbD4+wYYe345hnvKdxwzFhHq1YhOtN1W0x4yE9fxPiH7JhN+dMzZy49G0wpWMivFoR51KH"
    "zRDsK86vlNKCJcwY4lDNZjHJ9QjdH8oBqeUzVyLGNaxPe/IR0FsxHcE/AP2MDmugVMWwPYCfaTuM"
    "WS9qOgD5H4wZRa7WdVmQ4rAGijbCoT/tzStWHUMD6R8/jOh79ELRC7FjFvJFl3X+01HAhfeYe60m"
    "+lx8AUS+EYbObt6pLaDxNKxcixt4TQhaqpJnebAe75QUbo5FoXHrQ2mC+5R4XOmay2GPSJz2hqgC"
    "AJ1Gyd0YewDVXd4L7LUE/rHij7lFdNjEbe0zEvtHLGruTnX7ayZ5BJb4crHZgV7OEk65B5ty+SXF"
    "p4fIDLhjAZ5xRS4NyhhykRTG4YzXVPybCTuFwWQHd9xFwfc73rfzOtkC9T2HV7hA1Sa/8lO5F9Ct"
    "BUC2GIYpA60v4grHcU/fAHcnWIa4+EeLIqozk1zKgUkUettirDRTBZ9diKrafb4alrYJWtioTL05"
    "0KBSNfyWsNktXd00lEd5Nh9c30ulNPEa36xV7kjctDpRK6odfi5Kt/ROG9NCuCKcAGymJmUZfVK1"
    "JqHICOR6qFmFEi99lCdN3m7xzkfbcexTtmo+JrkYANHxsTkgYaXlcL9R1ClxHZvNVikM7JfgfdEh"
    "vDoBnlPNLuNEjMMc5oBjC4ohvA10I2uiiMIPac7lmfitgBXQib5clNJuip8sZeuhbvJes+dzIZBq"
    "6X2W+mCC41HNg53J6S2L0GJ0L5sc/DbcaarU91/Jmy8RomizPJ6CFdSK8JRdAKIIbprnxDENQ/sV"
    "f/JC37w396bDhhcptULycsxjJviAZp0W7zFunRTcMfFn26ZT70LmHEzquBtUAmpCK+9vIEF6Cjok"
    "wgPMghHQiAg8yw6k28gCrypWDs4utRQ08AZFbqbhDEX42UpgtgqWx0oEOHQPf8JZix/8DMgl96Va"
    "BdwxAIJMzBNPcpLNhJxjuAmriGIFkWtOPXL9YIoOTZTmrkEM3EzReqtG/leRrsVHgzjKkQbHc6iC"
    "P6OL1LrbkrZY4cuo5rf7YULxVrolSdydaYxTMF5BnN3BO6Ny9JV1s12QwRRWhLwaro3OckHwJIzi"
    "obfwROKxNtRSkmF3TDTEfES/AOMs94i2GvBcKOE20ZBXLu532h3wzrKdNsil4C8TcMONqSC5XAHA"
    "Kc5AdBycAeQqebFYNv0mY+8xeyJeDDefBI0qU3OIFa52NpL9eb8r9h7lvYT9chNmiN9FHljXQeAd"
    "9jhr6po2fQEp6aV8WrxnHFOQIGoD63S+LeXSjRjprR9kABCsZzrZo0W7BK5OdCPouhZKtjCYE1IC"
    "3SB2XreI9Foz7nQ3lfKGa6YK4lz6cbdh9hbZmAy13AnBSKnlgMj8RmPxEKFI4ZXYCahkFZZat0Z3"
    "CqghyzbztgliyasLhS2hdrbVJk7MWuG9URfXDTz+g9g0y6eBRp4Wq0IAt5tRbvyZAFSNwQV+K23V"
    "e/YapdlBnYDMol5+5GyOukf4CNVFIp0Fx1HlEcpPHuqOuyjPP48en0eGZ895T5Vv+RGWS24nr3i7"
    "1C/EH2gtxlDaQO0Bg6LSPetTl4BPJJntgCj7vmHPQwOSqw3xbqE6lmfCiqsqwwmdXvoq0Vz2bIbw"
    "YyvRCjvNACPvReBX/RSXL16KxWkBXf05CNhDwCryW4OaOad/zOFoihynfT6x1140flCmFcdV4L0s"
    "6ho+rSnVXTzO7RSO3Bk7kG/3sVXvghyzbsU24mQUj2m+BOim0HU1pE9slw/siVf+Y4G3LBH7fyDx"
    "R91uTnrkPhK6kQw1yiNOxHbkial7ALlvF6eJsspS6bg7E/OWvSJxje4fqZU9Fswp5GwWUq49+r1h"
    "2idwBp/2ENiIafM0dgSpV5vH9YcYt3grsmLCUKDsXQA/fA2fOuGPKZ1VzCX5ti7YRWsyEFndBMTk"
    "MkuqJcUaN+VFkMpLuqYxXgOi7xmxiW9N53e4jtymDDixIEvbADeY0i5nCT+DH57fTn403lPRpkxp"
    "DdN462e1VsbuLJUOeC5ImfeIv0d1sT3rCbKW1UT6gzVoBVag6Y0Coj/2CIInyajnk9a+cVgG83cP"
    "q0KAVqQeisav+5O4Q4oZsnzWaKB+z6Qd3XlgBuJ0zJAnvGEsyvKpIdpDWhl7+5Nb82gCAIFb9kjF"
    "7aDacAViz6saiLIQK8OG+1a9B6YfjwJ8vGDJ25ADxRhW6CvIXCGdUiuAG1/EErLpfd0xRsRW4X8u"
    "a9i1R3MeUjIU+qjPRr7mkG3eB+904RVSgSdn83TSXvgZP/BOCXFWrBbtPJMas/h8QuGbVQE3ZJ0H"
    "sOdkRc8SvpzrACaxC3WQGl0sw/qPJ3DtQ2X3d902siVDhddN/jiiRfMgUKnqZa08mxGO3oPB02a5"
    "5KNvKdFEHr5rDflxHdC4k1UT/pnbuWaLQiNoiS9bHbkzxJc5X6DrPtoRoCU6mwKNtSrYl775L4bA"
    "bNJONFcU0YYXddWOw3/0M5UlhK0vej/HAE/nm8wpu32sUDWzR78G1ZE5nwJdlHLnnS91wGXkEImx"
    "bjmAJOB20mj8SwByOvkPTDbyiZlepofVr5kwi0oO6ag8aDAHguXGmum2EaP+zk2IGVHPI70AdavF"
    "T+y6U8lw5V2BIT1o1E2dC6bmi8htpDP8qkPrEUvNar7XA+5U4BWOAHIcPl/7S+EQ7ncW5IRdpxzL"
    "T7rzG9EPYfAKkyHPdzHfCvzHSZMHuyCsNKLtHoabynsCUN0L/jlQFV7LqvNhK3vfiMitRiFZAnpS"
    "3jt8A5rwarH7eJJLzDFgiwp+3iFHoAzE4q0BlSPzXCx5Dq3uBk/CZSSxYCujFVM+nmuRuGHQAKC9"
    "24gBmjiMZaTXlyLyMnvrayV7pFHCqz+33lurSrqSV50TsF31OFN/2WO7SK9bJtqtwDt3uifjf+4/"
    "BXebyBqyD1r0cJ/vOdYoj8FisCrUPIQJMttl95cY1qkyZbHxMnVEjlTsfMc+2LL7SCdhlNN/EJbb"
    "ffqM4XT3tBtGKPwFAOxYL65q17Uk0AQ9U2zGS7gKm9tE5TGHHnlPK4cV+Gkk1DR51yeFoerCEimP"
    "1QfpbY8aZOwVnGeSwSBt37s4UfhF0pU6C9GAqbxr9RxI6nZVEuWlR7MPJnzoR279lweH0Kf7EW0x"
    "sxhvihJmmsDaQSq06DhOyBlAqgqIMuPJqII3AJMNf/IeU3nsWbqB+awO3YlbN8OOBW372JjK9KA7"
    "xALohL9i7UPLaQpzmeRYejS+RPswoYbLVNsBR66WVxXYi2yhKnfkwSxjG0oLoIPbDaK+kMlbf/Gc"
    "wVayK8UWQb9SHGAq2byYSdyiTcI34oMZdfVUa6gJcLVX0ifAX34RbtpJAMxkukaeywxDkyrMGTZ3"
    "mSL+rhdhza1XOhlgB3DhflKmQBuqBZgauEsvy0IW96GED6pY1kYjtDX3dtQu/H4kswvgVhusi1L8"
    "k87pWyzJaDn2J2wb0ituPNUKnn7aX+173bCSfRv1ZQXvJ9J3CFa3oAKRINDxiDDtaJrcTPGfVxqv"
    "ACjlFNkthfWlcuRloerCQWbRTYXsKJoRue2FwkqyKJXLb/lNdOJa/qWA8a5twyJh48d4E/V/a6MZ"
    "i1IMt59d6zPDhvVkPhO0bzZ7q0O0jBd8TLfmQY8X7IZm9kyvJ581DEjJO1jELXm5j1qr9y/oSdvD"
    "fUNcv54AgT0asQbPMvZzAD6lj3VbwzoctQhGiVUA4aYPdDG3SXzSb0WmMtoYYuwPLdKSwyWEN9Ue"
    "XwKSOdlNlyU9u5oH685AvuxpN8xElHRKpQa81pzeB78g1wH6UM3dmASjV8OmTa4iOZIFcc2L5mfz"
    "BquI5Jw9ENsgm2qKHF41/JkWKOZMx/1wj0BolcGJAOxUIv4FqmfYVsXyLrxxhizE75zYCPgslOMe"
    "aoz9pD2Cr18UPLDMCW+XulHsf6kH8W2N4V8vUJJiJpzZeRn0A90j0zhzJoFdRPKFYZpwJqRgLvKD"
    "Evx4AuTIdd638RdUtiKadN1FE1P+b4VIxT7QpLluC7HgeGSuE6Qs6bvgF0wBALFqzrhK5IwqlnkT"
    "mdce+EmOVx1njFKyXgC10FMLdMLbS+Z+9WeaVO5B3C3GGGW3NM0LSbDZwRXifQZFsIi7ZamBWJTl"
    "S/Ycr5RP6TbC5hG6Rm3QOmTWL16VElItZUGkfNc0vGAmz6nCK+auBn0X7yyO0VM+yo832luHUB18"
    "qGHYAIEQOpMsfBb3Pt+sZ0OvX7cJ4z2syBbaOfJ6JZjJMFkHmyOmAUbfGr+IDaRyQ/uHVqHpfB2I"
    "bjylt/laIuY0UMcR/a8VwaJpyiwNtxaHQXiP4yCzlxq4nkO97oLUl8b8AkuKEviTaoEAY5RU9dhY"
    "dUfhH4CnCfchdcIEz6E0+8UmAJ70eN6uXsqgbR5R9QaRM9prv3z0MnmhaZFL3DzphLX2OnC62I0o"
    "qXYzY+SOzSveEb1kMv6qA/FSKm3SonAPnOM+by1hhgU55XzUbZ/QW/UGyVZ87FCE9W0dNqoIcyE3"
    "bMXkVaU56SHaQLobNJu0DcSgYvEtXrhN6pdB8m9UD4xAAFbBHFAN7UICts8xhcLqeRiWKKINX+ci"
    "yQ6/qWMTpSVlkc5PMmvyW834tSFWBKh5SCOaxkZbz5mExRSRPcr3fiOQu+FFzuyQV6ZE/lMcrSud"
    "PKgTNcMnB92Pzl70TLXokK0oecwLtVCb8nLMYIEj+YY5Ar+R33qgFGG0J5Dbt2nkAC2oZs2Vcb+B"
    "W5HccCdUqEL9U8pEkLFN9zODG/l3TeO+GOoMhcCcC0oXkj/qvF2V1O6GEtwoeBw37EzgA1isRGHR"
    "AHyoHXEowQojjjPnddloh/vOc+akWq9Iehic2IINQmAX70WPdcYyhhSp6EXTaFDpq3BKETvTLoPj"
    "C6xEItEJAPCMPPgjN+Ia/EYMoeMQvNKFAepv3xR8m1riRJvIAotDe1uu3xw75YKnacl+LfYUNnFR"
    "tWii6LZlo3W2hi3BF+6jVSr4l1Ct9WTcr32/DkvEH18Al2U+gcYq67w+KWel4M6Yt2cr+l0I0k4s"
    "jQSlL5QY0yj+xq1l9rs7eVz1haJ2AEq0BIC4nVKpLsqxYTuXbCths5oswD7RA7hu0i1Zq9ow/Jkn"
    "dlXQZbc12RGcSrJmw6cA+DGDFUbXCif9X9iWaYQ32rhlE9c9eppMyBhdlvI2suBCvSDWDP5rEJFY"
    "yfodUzB/BN6tHJ7ksGn8vnbjuMx9Q5tagyCTA1Kb3cMTOFrIABffbNBaEdOKZ3og8cSC9RTdOnsb"
    "V6Jn5iiVC4XwH2fFCbZG9KSKAv0kWfJwCOCBI+eSQ9S9VfaOyESdGjzzDcoekkPmhcUE4xsvbvhC"
    "qYUKeKFUheqrVZs8qtV3ALKTdb32PlfOgkhzOpMSVz8gWg5k57oK3U3scc8XLWyRtuwoAINToy7s"
    "eEDzCd2OTQNXM6TFUPHPjfs0gk/2sju9dZ1Ph2PYEDDETXiTvkKv1JA5UNBgHG6bCXswrGzSf7Fz"
    "UrXoXgh1KZ9dtorrnwPSKOhi1SX2FjhwJIThUC3oiUcq5hJmlKUQMfTAIdzKou6Hn/kxix90pTK8"
    "QKeE/ErZAG+dALr+DkWTwiauUL41ntS25m6HB6tqC7oZqskVa1TVEO0k5DXBkXDsH6rgFocvWxr8"
    "nhCGsO4nxeJcEu5PBuUooz54ndCyTfw1ckbNV4G0c0/IPYxpxpDQ8LMGwmIXuWrPp07VIe5utZIB"
    "WYIqbQjFSG+r2T/1Y9aBE+hesx2hVs1AAB121LBqAeKXZRTpdiNjGEWcKN42THfYYD+P36cwi0PO"
    "qGwdV7FB1WA7bunHpXq/abgv2UiKZj21gSmYuWKQ3gr6JjrrjhfB2wuwITniGZYRtucHrlsPTDN6"
    "kvmiNe0KgTG0djzaTWXgpfFHtDfeJLwAVJbBKgeabCnLPHTwMI3nADeXXin1THs5z4esRvaTrtP7"
    "XH/CoOcsmuwifQb8YbV7APac4gd8lQ/LoARKJOIHQ/F3WQSr/BeU3sQ6+RtHy4BTw2wQYKZ9Kpdq"
    "9o9dvvkyo1J9Qt+ZvWbZIkF011OcYPuRBcGJGMYudhWVzXpdl/GAzBR8TbX6xVGXBtSBuAtmAMvv"
    "FbyE1qQc+ixbBsgxcQ09sx3vElyEAbNlv0mXyRhXOYZJyzD4uyfwVYP4ZpZW1iGUyOE1dtFHAXFZ"
    "h9duL7gYpYndyj/0VeNExg6pQXCHYdIb/C1zGvSpV8kEjSXCFcxE6lsrn/5DsdVUDeiqFzxkLe2j"
    "22E3G4bip1glSd+qAEd9VJ80Eli1bMHdooFQ5YXLlm9Hjsg71E/0LtpwKOGfv9omdqZjSYhywDKq"
    "yji1f6g+E2SiHrpiqOcipQiwlfNf50Ulegi1HIWnMHvYIsYE7Cu+haXOPYMOmOa3aPU7rHAjfazh"
    "dQeNZyP4iC5KyIrgtG1CHY2q6kBvGPTAm3EiAMME2utwxPCKSA90OesStCpWA9y4Jv6rcRWehRCx"
    "QYDwZw2YWMQV2K8/HdYLdR7zDWvnv4TvVI30L37OTOxaIDt2AbSWW+eacMoBYvJRnuJOsZlJZAFV"
    "6sFOMHweR5d641ae1BVFvFfeyDqgX8Bx9Q9NkAjH9HMEW7zQMIpjD/uLAKY7jh9GmAUx45sku2GS"
    "z2jrpzhiewlVkOY6yWD3lQZOLbD+HeM3kgLlmFiH5l6P0VAmmUgt2Q9BwwuTOL583seh0zX+wkow"
    "10LruYoVajSMdhHx1riMJW2u+17WqQzRLALyNpNr7jOkEHq3A+QfnGDTJ6BZMrTXlRJOsOhByTRd"
    "AO5tyq5h036vX9SC/EYgo0CLIPbHmuAwvh96p00j1Lp5z4w8faFr9E5mtPU5pka9Mq32cwXIfrJs"
    "nlX6bRGRRxWIUG8YhBCwZx6XKUXQvP4g3j9uHjfjnRfMB4w27mVOsIa7X8cKsCCA80jak0GCrzW5"
    "+3LbhUopffiecgGCodsXALUsVQ39J0DqF06oAdt69AnZeFoSRbNq80TZA+SJaTjqF2HYS7oOgsIj"
    "fBDFIN0AZYQZtOCeXB7n0Sax2C7wumP2H+KpYN+R835ZsOd6BZldtM2Vq35eRPCASaPFFLyT/W1E"
    "HeCJT8+YWx1qK8tR7gV+QxmpDvC/Yjof4Vi6IEx+ABDZg+JypsBtk8g2abVXMcZMuZUu1IIQn1y2"
    "cTOuDppVqsMG8itZ0p413EhqlHf9ndRWL2lA/DSQRXwYXZ10BaoyvplBxShQB7/dDmY7q0h9Ci5P"
    "+gvHsS5m2iJ1RX8hORDXonUo+2055sKq/HMZv2mZ41PLapsb3qnHjC7UbvKZAMFInzONGlcH9CV9"
    "0BqYg6trFuGqZOkoidAalPBaxvkkhTOVb6riQBL7iaXSL7NNGDznwJIWxKsCYvOLyU7kP3/XWXkE"
    "9HHOpUczn4v1ItnD62iK1ihz4Q+PrPZf58yh4cCPUOg9qAC2FItTB56H3D4kxIgv6EGLUAdnRPsS"
    "qjdfAHb4ALdNyt2Eskie8D7mDNcp9D19ClDFN/xVQM0Vd0LVaeZSzReNY7dxVgTvXg/Giqd6CO+D"
    "VXPXm7o9CaYkzpUX6CuOszqCG/hw1RW5WY0xnxu9QqNXl0vKOgCJMRFcR3Mrsw3FXI7Vei7iP9At"
    "WqnrEbNdALpx0u5+v5hah9AkAJQ70mnxKpo3Yd8KVHTCZEmeh1nO+JmtdQezfiWjvY4Jsh6jPH7w"
    "JpjLKq9Bg95t8CFdr0XQKe1JFSvTd/1ls1BvpUnQElrblFW9Jkx16A1vUfZ4AujDFvF6WLnUm7Px"
    "igP3Yn2a7yRE91+kvGf1Co1wSnraoP0eNZUqD+c+twfrAK1iIIGoDXb6FcaDuiOmNO/KALQmbhtG"
    "52KX1O1NYy/uRoP8ArtQ1QpG35HAIp8zSLnhMm2cC7R+5GyrTI8SNPAIuftloewlsAriiaPMPq/c"
    "xzuwXYY4bCyi5CBqTHkkx6TQOtsVS27Grh12D5JIsNYw9JQkPIJZtMtdrXMf4H9OABTkvUXZW8BF"
    "pWovlf4TjngfaZY6wI7VK8EaNWwC4ZzNcsRb2W4zoXXzZRZ1+lnWA3SYEb75YY81wFrrHdu+gNiO"
    "PR6GM8NvQn5eN/wAZJMegw/flyD9uNcMjDf7Ctg9ZhxOkCW/4YcGljvJ7yZzxhZkvgnPa+OjE3b2"
    "TNScYy3JAHEznRKQMuWNItDkR1/H3FO67NdW6QV8pVL0jazDgB1ZDTGaIIzsGbmHN8hND6qFxfdU"
    "iNgcP+AfnwmINp5GaCRax3LdTAKa1fC1HcKAKvNEpWQuy0ynf0Bfy3akv5HthLrpcrBkojPoWdmG"
    "TN2eOYTkQ51VvAxK2DwhiwHEQv6NAFX0e8TrbwO1fVcIrIA6C6dDLxCBqUJl4wt3Qt0pSPeoium4"
    "Ra1izFMkq+qY0i1mHzutJUt7rsxv+kHEdPQA0KfmmA6ujfVbLhCQcU6a1LNX5sJz7gZlGZvmtEgb"
    "Xi1REJ4yBf0/EHe9JmsTsl4I/ValKH73MpHthMOm6jRvsQ2lANcESWEfpFHXOfW+H+ttivhjnHLJ"
    "If22NJq/XRCXZbU701ISeOIIPv6TAl5/P/O4nuJkyPOXWwOJUarVJ1WvhhhMMO5ZGLV4yaQ+ze0S"
    "OWwGixtBjrbdx1UpA/GJ3qfJeeFe0YBWy/FOmfqkMcGQzhu4bNkaqnIjYwpZfNqST+goALqUz6s6"
    "+XkYm2uMM5/MKsEYs+42jVMWhNQh+X7L6gZ6JWz5ySydgGe+2imvC3BIFIoFczMYvTnlJGYOkuNu"
    "Oftmu3zNPeEfSWnkJWGmfNy/NfqsWit2OviSbaswcgf5JUDBlhaqiiGyDH5C53clZj/oB8ZdQtO5"
    "m/tDvCkZzGqEAF8xGt+JySy95g5O3lsES9yAVQPZZ8Pfa06qOaBRMo3hxp48kFa23BE1dk7gwJXQ"
    "61e72qbrf9KZsvN+SboSxJXXBKUkbJ6D/rgEhbJH+CKgT3fVDOyfFYPAQtJWwkaUZqsaS+U112k9"
    "213MBE/xrXqaT4KW8QNRM9EWqmH3ohE/AKn7gWgHVZNjP6fJd7f1mGs5vpZIpwyXLO0BdOAUwGpG"
    "GbIAZ+oXSqvOnviKHVoqfT6ZJEZiDU5wEz3cnC/xWyN2Oon3S9gTNJdT2TDJCo9jzRiYaUDQslsh"
    "6w6f5Re324b1crpgBp7riiy4l9aJENos+RUxsXrjh2mQ63g4icDiAAlOvT3wsR7afvgqFz6EEq3j"
    "GvlwJfI/wIvOtWMnqf2XXuh+wiiK9m8fRAhoOe6pxRr5bI7MrP4vwlvJBWiIq0rstFXBC69dy3Xv"
    "FpVzWOYtqfAyvopQCN92l2goh3cwUQQ5kijvfsNPF6ZxIWE0Sbxcpb/gZSKkEMksSQPfUCJ2AJjZ"
    "JJx50jegAliSsOJgzCZZizPJgbJgeh5XQJXsfw032CRMpNc5XpjlfsKh1nUAYNSiCOc4IYLYk3gk"
    "peE+1gyZG98tdJDrJak+Y730P7aFAUuA3CP7mi/DPLb+S8TpY9Ox3VSmHjhu0fBD4caw9I4Ccz+K"
    "T8U86lWd17SVy2TtAByIWcsNTHDuuULQai+jR/J40qkIVNYQ5ab3DNczWNC4eJH4EHG6BMswWPAn"
    "TriVRIIzVXe9nWABR7bvT4AXuG3LgGCi0jlPhhLOiB+kENZo37pdDXOvX4TyAFjVG6YMmn8gbQ/M"
    "iPqyAFqRDXwZaynH7R7TCf2Aa70ffVwVL6dCALVu9jKs4IkXZecPgP0Fj7MNQ2XnjymbSjFrh79y"
    "G6FKBsdgQZrxTamHD66NE/0s4brzqtsRUfCu4hlszDT1j1Mz/EMX7wTEsm7nSd0zf1AjmjnzoM47"
    "GNpLo3SRNWv1O75M+K1AXZcpg8Aw/pxWpNh/UZ1qt5EtrQb2N+Jv+oXUADkAvI9kI8IylKcnu0vI"
    "bzXqmR20OvpvzLXgI0mu6Yz0bTKr0SqAHeFm2EJvzFt7DmoZKYhBw3MuhECWCKpgI+YBp71rgZtf"
    "+zEGtVqWz6/6dxOIKk/tbbgnzhOw44lTGdCRL3jlCdRN52isS9Ey60MOtCviQxxa20mNx6hFvA5Y"
    "AJ3bThTtpVb6RnjVW4ka2l2/gdZzUcEbiQlZnc4EYjwktuQaieddtTyXI7nnNp6y0k+Zzm3klR3Q"
    "pF/7unncm8BziybNTd4bQ6WPdfYXZgVCwdRms8aPCp1/XfBGJLnaqWYC250jt3OmG84Qi3EFvmaX"
    "+F1+ovLFmnQmWAqZKHrlAYEAfv8AJYZx0EB3BM+wFuU4nuwqphNLLe0Fp13tPX/8NJHegNFXlXNH"
    "Bsh1DPt8WgOFHkHwfje2Vgc6+E8K2zUhVQ9INtpR8g6xLHjWZcwjPr3piqYnVOgDdSXWROk2woFi"
    "B3hD74VWxGhI9TOARewo3q2GIcg7F9EAbDoQ6Ljzh87vYsLI8MFTWmRrUgAAAABJRU5ErkJggg=="
)

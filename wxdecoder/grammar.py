#
# Name: grammar.py
# Purpose: Regular expressions for the elements of METAR/TAF reports and the
#          ordered rule tables the engine walks. Every expression is anchored
#          at the start of the remaining text and consumes the whitespace that
#          follows the element. Order matters: the first rule that matches wins.
#
from .engine import catch_all, rule

##############################################################################
# regular expression fragments
#
_Intensity = r'(?P<int>(VC|-|\+)*)'
_Descriptor = r'(?P<desc>(MI|PR|BC|DR|BL|SH|TS|FZ)+)?'
_Obscuration = r'(?P<obsc>BR|FG|FU|VA|DU|SA|HZ|PY)?'
_CompassPt = r'[NSEW][EW]?'
_Fraction = r'\d+\s+\d\d?/\d\d?|\d\d?/\d\d?|\d+'
_Sector = r'((?P<dir>%s)(-(?P<dir2>%s))?)?' % (_CompassPt, _CompassPt)

##############################################################################
# report body
#
MONTH_DAY_YEAR = r'^(?P<year>\d{4})/(?P<month>\d\d)/(?P<day>\d\d)(\s+(?P<time>\d\d:\d\d))?\s+'
REPORT_TYPE = r'^(?P<type>METAR|SPECI)\s+'
TAF_TYPE = r'^(?P<type>TAF)\s+'
STATION = (r'^(?P<station>[A-Z][A-Z0-9]{3})\s+(?P<zday>\d\d)(?P<zhour>\d\d)(?P<zmin>\d\d)Z'
           r'(\s+(?P<bvaltime>\d{4})/(?P<evaltime>\d{4}))?\s+')
REPORT_MODIFIER = r'^(?P<mod>AMD|AUTO|FINO|NIL|TEST|CORR?|RTD|CC[A-G])\s+'
WIND = (r'^(?P<dir>\d{3}|/{1,5}|MMM|VRB)(?P<speed>\d{2,3})?(G(?P<gust>\d{2,3}))?'
        r'(?P<units>KTS?|LT|K|T|KMH|MPS)(\s?(?P<varfrom>\d{3})V(?P<varto>\d{3}))?\s+')
VISIBILITY = (r'^(?P<vis>(?P<dist>[MP]?\d{4}|////)(?P<dir>%s|NDV)?'
              r'|(?P<distu>[MP]?(%s))(?P<units>SM|KM|M|U)|NDV|CAVOK)\s+' % (_CompassPt, _Fraction))
RUNWAY = (r'^R(?P<name>\d\d(?P<inden>[RLC])?)/(?P<low>(?P<lmod>[MP])?(?P<lvalue>CLRD|\d{1,4}))'
          r'(V(?P<high>(?P<hmod>[MP])?(?P<hvalue>\d{4})))?(?P<feet>FT)?/?(?P<trend>[UDN])?\s+')
PRESENT_WEATHER = (r'^%s%s(?P<prec>(DZ|RA|SN|SG|IC|PL|GR|GS|UP|/)*)%s'
                   r'(?P<other>PO|SQ|FC|SS|DS|NSW|/+)?(?P<int2>[-+])?\s+'
                   % (_Intensity, _Descriptor, _Obscuration))
SKY = (r'^(?P<cover>VV|CLR|SKC|SCK|NSC|NCD|BKN|SCT|FEW|[O0]VC|///)'
       r'(?P<height>[\dO]{2,4}|///)?(?P<cloud>[A-Z][A-Z]+|///)?\s+')
TEMP = r'^((?P<signt>M|-)?(?P<temp>\d+)|//|XX|MM)/((?P<signd>M|-)?(?P<dewpt>\d+)|//|XX|MM)?\s+'
ALTIMETER = r'^(?P<unit>A{1,2}|Q|QNH)?(?P<press>[\dO]{3,4}|////)(?P<unit2>INS)?\s+'
NOSIG = r'^(?P<nosigchng>NOSIG)\s+'

##############################################################################
# forecast-change groups and TAF-only elements
#
GROUP_BECMG_TEMPO_PROB = (r'^(?P<group>BECMG|TEMPO|PROB(?P<pct>\d\d)(\s+(?P<tempo>TEMPO))?)\s+'
                          r'(?P<obs>(\S+\s+)+)')
GROUP_FM = r'^(?P<group>FM)(?P<daytime>\d{6})\s+(?P<obs>(\S+\s+)+)'
VALID_PERIOD = r'^(?P<bvaltime>\d{4})/(?P<evaltime>\d{4})\s+'
TAF_TEMP = r'^(?P<type>TX|TN)(?P<sign>M)?(?P<temp>\d\d)/(?P<zday>\d\d)(?P<zhour>\d\d)Z\s+'

##############################################################################
# remarks
#
PRES_RF = r'^PRES(?P<presrisfal>R|F)R\s+'
TRN_FC_WSP = (r'^(?P<type>TORNADO|FUNNEL CLOUD|WATERSPOUT)\s+(?P<betime>B|E)(?P<time>\d{2,4})'
              r'(\s+(?P<dist>\d+))?(\s+(?P<dirfrom>%s))?(\s+MOV\s+(?P<dirto>%s))?\s+'
              % (_CompassPt, _CompassPt))
AUTO = r'^A(O|0)(?P<type>\d)\s+'
BEGIN_END_WEATHER = (r'^(?=(VC|[-+])*[A-Z]{2}\S*?[BE]\d\d)%s%s(?P<prec>(DZ|RA|SN|SG|IC|PL|GR|GS|UP)*)%s'
                     r'(?P<other>PO|SQ|FC|SS|DS)?((?P<begin>B)(?P<begint>\d{2}(\d{2})?))?'
                     r'((?P<end>E)(?P<endt>\d{2}(\d{2})?))?\s+'
                     % (_Intensity, _Descriptor, _Obscuration))
ICING = r'^(?P<type>ICG)(?P<typeic>IC)?(?P<typeip>IP)?\s+(?P<extra>\w{4}\s+\w\w)\s+'
PEAK_WIND = r'^PK\s+WND\s+(?P<dir>\d{3})(?P<speed>P?\d{2,3})/(?P<hour>\d\d)?(?P<min>\d\d)\s+'
WSHFT = r'^WSHFT\s+(?P<hour>\d\d)?(?P<min>\d\d)(\s+(?P<front>FROPA))?\s+'
LIGHTNING = (r'^((?P<freq>OCNL|FRQ|CONS)\s+)?LTG(?P<types>(IC|CC|CG|CA|CW)*)'
             r'(\s+(?P<loc>OHD|VC|DSNT))?(\s+%s)?\s+' % _Sector)
SLP = r'^(?P<type>SLP)(?P<press>\d{3}|NO)?\s+'
TEMP_6HR = r'^(?P<type>1|2)(?P<sign>0|1)(?P<temp>\d{3})\s+'
PRECIP_1HR = r'^(?P<type>P)(?P<precip>\d{4})\s+'
TEMP_1HR = r'^(?P<type>T)(?P<tsign>0|1)(?P<temp>\d{3})((?P<dsign>0|1)(?P<dewpt>\d{3}))?\s+'
TEMP_24HR = r'^(?P<type>4)(?P<maxsign>0|1)(?P<maxtemp>\d{3})(?P<minsign>0|1)(?P<mintemp>\d{3})\s+'
PRESS_3HR = r'^(?P<type>5)(?P<tend>[0-8])(?P<press>\d{3}|///)\s+'
PRECIP_3HR_24HR = r'^(?P<type>6|7)(?P<precip>\d{4}|/{4})\s+'
DENSITY_ALT = r'^(?P<type>DENSITY\s+ALT)\s+(?P<denalt>\d{1,5})(?P<units>FT)\s+'
CLOUD_OKTA = (r'^(?P<cloud>CU|CF|ST|SC|SF|NS|AS|AC|CS|CC|CI)(?P<okta>[1-8])?(\s+(?P<mod>TR|DSNT))?'
              r'(\s+(?P<verb>MOVG)\s+(?P<dirm>%s))?\s+' % _CompassPt)
LAST_OBS = r'^(?P<last>FIRST|LAST)\s+'
PRESS_Q = r'^(?P<pressq>QFE|QNH|QNE)(?P<pressmm>\d{3,4})?(/(?P<pressmb>\d{3,4}))?\s+'
AUTOMATED_MAINTENANCE = (r'^((?P<typeam>RVRNO|PWINO|PNO|FZRANO|TSNO|VISNO|CHINO|SLPNO)'
                         r'(\s+(?P<loc>RWY\d\d[LRC]?))?|(?P<typemc>\$))\s+')
TWR_SFC_VIS = r'^(?P<type>TWR|SFC)\s+VIS\s+(?P<dist>%s)\s+' % _Fraction
VPV_SV_VSL = (r'^(?P<vis>VIS)\s+((?P<dir>%s)\s+)?(?P<dist1>%s)'
              r'(\s*(?P<add>V|RWY)\s*(?P<dist2>%s))?\s+' % (_CompassPt, _Fraction, _Fraction))
TS_CLD_LOC = (r'^(?P<type>TS|CBMAM|CB|TCU|ACC|VIRGA)(\s+(?P<loc>OHD|VC|DSNT|DSIPTD|TOP|TR))?'
              r'(\s+%s)?(\s+MOV\s+(?P<dirm>%s))?\s+' % (_Sector, _CompassPt))
SNOW_ON_GRND = r'^(?P<type>SOG)\s+(?P<amt>\d{1,3})\s+'
NXT_FCST_BY = r'^(?P<type>NXT\s+FCST\s+BY)\s+(?P<zday>\d\d)(?P<zhour>\d\d)(?P<zmin>\d\d)Z\s+'
HAIL = r'^GR\s+(?P<size>%s)\s+' % _Fraction
VAR_CEILING = r'^CIG\s+(?P<low>\d{3})V(?P<high>\d{3})\s+'
NOSPECI = r'^(?P<nospeci>NOSPECI)\s+'

##############################################################################
# rule tables
#
_MainRules = [
    (MONTH_DAY_YEAR, 'mnthdayyr', False),
    (REPORT_TYPE, 'reporttype', False),
    (STATION, 'station', False),
    (REPORT_MODIFIER, 'reportmodifier', False),
    (WIND, 'wind', False),
    (VISIBILITY, 'visibility', False),
    (RUNWAY, 'runway', True),
    (PRESENT_WEATHER, 'presentweather', True),
    (SKY, 'skycondition', True),
    (TEMP, 'tempdewpoint', False),
    (ALTIMETER, 'altimeter', False),
    (NOSIG, 'nosigchng', False),
]

_TafRules = [
    (TAF_TYPE, 'tafstr', False),
    (GROUP_BECMG_TEMPO_PROB, 'grpbecmgtempprob', False),
    (GROUP_FM, 'grpfm', False),
    (TAF_TEMP, 'taftemp', True),
]

_RemarkRules = [
    (PRES_RF, 'presrisfal', False),
    (TRN_FC_WSP, 'trnfcwsp', False),
    (AUTO, 'auto', False),
    (BEGIN_END_WEATHER, 'beginendwthr', True),
    (ICING, 'icing', False),
    (PEAK_WIND, 'peakwind', False),
    (WSHFT, 'windshift', False),
    (LIGHTNING, 'lightning', True),
    (SLP, 'sealvlpress', False),
    (TEMP_6HR, 'sixhrmaxmintemp', True),
    (PRECIP_1HR, 'precip1hr', False),
    (TEMP_1HR, 'temp1hr', False),
    (TEMP_24HR, 'temp24hr', False),
    (PRESS_3HR, 'press3hr', False),
    (PRECIP_3HR_24HR, 'precip3hr24hr', True),
    (DENSITY_ALT, 'denalt', False),
    (CLOUD_OKTA, 'cloudokta', True),
    (LAST_OBS, 'lastobs', False),
    (PRESS_Q, 'pressqfn', False),
    (AUTOMATED_MAINTENANCE, 'automaint', True),
    (TWR_SFC_VIS, 'twrsfcvis', False),
    (VPV_SV_VSL, 'vpvsvvsl', True),
    (TS_CLD_LOC, 'tsloc', True),
    (SNOW_ON_GRND, 'snwongrnd', True),
    (NXT_FCST_BY, 'nxtfcstby', False),
    (HAIL, 'hail', False),
    (VAR_CEILING, 'vcig', False),
    (NOSPECI, 'nospeci', False),
    (WIND, 'windre', False),
]

_GroupRules = [
    (VALID_PERIOD, 'valtmper', False),
    (WIND, 'wind', False),
    (VISIBILITY, 'visibility', False),
    (RUNWAY, 'runway', True),
    (PRESENT_WEATHER, 'presentweather', True),
    (SKY, 'skycondition', True),
    (TEMP, 'tempdewpoint', False),
    (ALTIMETER, 'altimeter', False),
    (NOSIG, 'nosigchng', False),
]


def _build(rules, unparsed=True):
    table = [rule(regex, tag, repeatable) for regex, tag, repeatable in rules]
    if unparsed:
        table.append(catch_all())
    return tuple(table)


MAIN = _build(_MainRules)
TAF = _build(_MainRules + _TafRules)
REMARKS = _build(_RemarkRules)
GROUP = _build(_GroupRules)

TABLES = {'main': MAIN, 'taf': TAF, 'remarks': REMARKS, 'group': GROUP}

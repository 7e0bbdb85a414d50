"""Static TCL command keywords offered when no narrower completion applies.

Each keyword carries a numeric tag; several spellings of one command share a
tag.  ``KEYWORD_DOCS`` maps the tag to ``(detail, documentation)`` for
``completionItem/resolve``.
"""
from __future__ import annotations

# Tag attached to completion items that have no static documentation
# (file names, item ids, dictionary names, file types).
NO_DOCS = 0

KEYWORDS: list[tuple[str, int]] = [
    ('SELECT', 1), ('WITH', 2), ('FROM', 3), ('TO', 4), ('COPY', 5),
    ('SSELECT', 6), ('SORT', 7), ('LIST', 8), ('COUNT', 9), ('SAVE.LIST', 10),
    ('TOTAL', 12), ('BY', 13), ('BY.EXP', 14), ('BASIC', 15), ('COMPILE', 15),
    ('DEBUG', 16), ('RUN', 17), ('CATALOG', 18), ('LISTF', 19), ('LISTFILES', 19),
    ('MESSAGE', 20), ('PORT.STATUS', 21), ('BREAK.ON', 22), ('LISTU', 23),
    ('OFF', 25), ('QUIT', 25), ('BYE', 25), ('LO', 25), ('LOGOUT', 25),
    ('LISTPTR', 26), ('LIST.ITEM', 27), ('CT', 27), ('LOCK', 28), ('LIST.LOCKS', 29),
    ('CLEAR.LOCKS', 30), ('CLEARCOMMON', 31), ('AND', 32), ('OR', 33),
    ('LIST.READU', 34), ('UNLOCK', 35), ('CD', 36), ('COMPILE.DICT', 36),
    ('CLR', 37), ('DISPLAY', 38), ('SLEEP', 39), ('DATE', 40), ('TIME', 41),
    ('GET.LIST', 42), ('EDIT.LIST', 43), ('DELETE.LIST', 44), ('CREATE.INDEX', 45),
    ('DELETE.INDEX', 46), ('CREATE.FILE', 47), ('TYPE', 48), ('FORM.LIST', 49),
    ('PROFILE', 50), ('STATS', 50), ('AUTOLOGOUT', 51), ('CLEARSELECT', 52),
    ('CACHE', 53), ('LIST.CACHE', 54), ('CLEAR.CACHE', 55), ('CLEARDATA', 56),
    ('COMO', 57), ('CONVERT.UTF8', 58), ('DATE.FORMAT', 59), ('DELETE', 60),
    ('DIVERT.OUT', 61), ('ECHO.ON', 62), ('ECHO.OFF', 62), ('P', 62),
    ('ECLTYPE', 63), ('ESEARCH', 64), ('SEARCH', 64), ('LOGOFF', 65), ('LOGTO', 66),
    ('MERGE.LIST', 67), ('PHANTOM', 68), ('RESET', 69), ('SET.DEBUGGER', 70),
    ('SET.FILE', 71), ('SETPTR', 72), ('SHOW.CONFIG', 73), ('SHOW.LICENSE', 74),
    ('SP.STATUS', 75), ('TERM', 76), ('UPDATE.SQLSERVER', 77), ('DEPLOY.SQLSERVER', 77),
    ('UPDATE.VOC', 78), ('VERSION', 79), ('WHERE', 80), ('WHO', 81),
    ('ADD.ACCOUNT', 82), ('DROP.ACCOUNT', 83), ('CREATE.ACCOUNT', 84),
    ('DELETE.FILE', 85), ('LIST.INDEX', 86), ('LIST.ACCOUNTS', 87),
    ('LINKED.ACCOUNTS', 88), ('CREATE.VIEW', 89), ('DELETE.VIEW', 90),
    ('NSELECT', 91), ('SUM', 92), ('CREATE.MVVIEW', 93),
]

KEYWORD_DOCS: dict[int, tuple[str, str]] = {
    1: ('SELECT {Filename} {Criteria}',
        'Select records from a file with the criteria specified. The list of ids will be '
        'stored in the active select list (0).'),
    2: ('WITH {Fieldname} operator {Value}\nWITH {Fieldname} operator {Fieldname}',
        'Test a field against a value or another field'),
    3: ('FROM {Filename}',
        'Used in the COPY statement to specify the file where records are read from'),
    4: ('TO {Filename}\nTO {0-9}',
        'Used in the COPY statement to specify the file where records are copied to\n'
        'Used in {S}SELECT statement to store the list of ids to the specified list number'),
    5: ('COPY FROM {Filename} TO {Filename} [ALL,OVERWRITING,DELETING]\nCOPY {Filename}',
        'COPY Records from one file to another. If a select list is active, only the records '
        'in the select list are copied'),
    6: ('SSELECT {Filename} {Criteria}',
        'Select records from a file with the criteria specified. The returned record ids are '
        'sorted. The list of ids will be stored in the active select list (0).'),
    7: ('SORT {Filename} {Criteria} {Fieldnames}',
        'Sort the File and apply the Criteria. Sort criteria are specified using the BY and '
        'BY-DSND keywords. The Fieldnames listed are displayed to the screen or printer'),
    8: ('LIST {Filename} {Criteria} {Fieldnames}',
        'List the File and apply the Criteria. Sort criteria are specified using the BY and '
        'BY-DSND keywords. The Fieldnames listed are displayed to the screen or printer'),
    9: ('COUNT {Filename} {Criteria}',
        'Counts the number of records in the file that meet the selection criteria. If no '
        'criteria is specified, a count of all records in the file is returned.'),
    10: ('SAVE.LIST {Listname}\nSAVE-LIST {Listname}',
         'Saves the active select list to the Listname specified. If no Listname is specified, '
         'it defaults to &TEMP{PortNumber}&'),
    12: ('TOTAL {Fieldname}',
         'Totals the specified field and displays the total on each break line and at the end '
         'of the report'),
    13: ('BY {Fieldname}\nBY.DSND {Fieldname}\nBY-DSND {Fieldname}',
         'Sorts the file by the field specified. Multiple sort criteria can be specified in a '
         'select or report'),
    14: ('BY.EXP {Fieldname}\nBY-EXP {Fieldname}\nBY.EXP.DSND {Fieldname}\nBY-EXP-DSND {Fieldname}',
         'Sorts the file by exploding each multivalue in the field specified.'),
    15: ('BASIC {Filename} {Programname} ( {options}\nCOMPILE {Filename} {Programname} ( {options}',
         'Compiles the specified program in the file. Options are\nD - Generate debug symbols\n'
         'G - Generate C# source code\nL - Generate C# source in local file'),
    16: ('DEBUG {Filename} {Programname}',
         'Runs the specified program and launches the debugger, the program must have been '
         'compiled with the (D option.'),
    17: ('RUN {Filename} {Programname}', 'Runs the specified program.'),
    18: ('CATALOG {Filename} {Programname} [AS {Newname}]\n'
         'CATALOG {Filename} {Programname} FUNCTION {Functionname}',
         'Creates a VOC entry for the program. If the AS statement is included, the VOC entry '
         'will be Newname. The second syntax is used for Javascript and Python functions'),
    19: ('LISTF\nLISTFILES', 'Displays a list of all files in your current account'),
    20: ('MESSAGE {*} {user name} {user number} {message text}',
         'Send a message to console of a specific user port number or all'),
    21: ('PORT.STATUS {PORT pid} {STACK} {FILES} {VAR} {BREAK} {DEBUG} '
         '{PROFILE ON/OFF/CLEAR/IMPORT}',
         'Analyse currently running processes. See Application Performance Profiling '
         'documentation'),
    22: ('BREAK.ON {Fieldname}\nBREAK-ON {Fieldname}',
         'Forces a break to occur when the values of Fieldname changes. This is normally '
         'accompanied with the BY clause.'),
    23: ('LISTU', 'Displays details of all users that are currently logged into the system.'),
    25: ('OFF\nQUIT\nBYE\nLO\nLOGOUT', 'Terminates your current session.'),
    26: ('LISTPTR', 'Displays a list of all printers configured on your system.'),
    27: ('LIST.ITEM {Filename} {Recordid}\nLIST-ITEM {Filename} {Recordid}\nCT {Filename} {Recordid}',
         'Displays the contents of the record in a file to the terminal'),
    28: ('LOCK {Locknumber}',
         'Sets a system lock on any of the 64 system locks. (0 - 63). If the lock is already '
         'set by another user, your process waits until the lock is released.'),
    29: ('LIST.LOCKS\nLIST-LOCKS',
         'Displays the system lock table. The process id is shown if a user has set a lock.'),
    30: ('CLEAR.LOCKS {Locknumber}\nCLEAR-LOCKS {Locknumber}',
         'Removes the system lock specified by locknumber. If locknumber is omitted, all locks '
         'are removed.'),
    31: ('CLEARCOMMON', 'Clears all variables set in common and named common.'),
    32: ('AND', 'Applies the AND operator to your criteria.'),
    33: ('OR', 'Applies the OR operator to your criteria.'),
    34: ('LIST.READU\nLIST-READU', 'Display all file and record locks on the system'),
    35: ('UNLOCK {ALL} {USER user name} {PID process id} {FILE filename}',
         'Removes the specified lock from the system.'),
    36: ('COMPILE.DICT {Filename} {Recordid}\nCOMPILE-DICT {Filename} {Recordid}\n'
         'CD {Filename} {Recordid}',
         'Compiles the specified dictionary. If Recordid is omitted, all Itypes in the '
         'dictionary are compiled.'),
    37: ('CLR\nCS', 'Clears the terminal screen.'),
    38: ('DISPLAY {Text}', 'Displays the text specified to the terminal.'),
    39: ('SLEEP {Seconds}\nSLEEP {hh:mm:ss}',
         'Sleeps your process for a number of seconds or until a specific time'),
    40: ('DATE', 'Displays the Date to the terminal.'),
    41: ('TIME', 'Displays the Time to the terminal.'),
    42: ('GET.LIST {Listname} [TO Listnumber]\nGET-LIST {Listname} [TO Listnumber]',
         'Get the Listname from the &SAVEDLISTS& and makes it the active select list. If the '
         'optional TO statement is used the list is activated on the list number.'),
    43: ('EDIT.LIST {Listname}\nEDIT-LIST {Listname}', 'Edits the listname in the editor.'),
    44: ('DELETE.LIST {Listname}\nDELETE-LIST {Listname}',
         'Deletes the listname from the &SAVEDLISTS& file.'),
    45: ('CREATE.INDEX {Filename} {Dictionaryname}\nCREATE-INDEX {Filename} {Dictionaryname}',
         'Creates an index on the specified filename using the dictionary name. Indexing is '
         'only supported on SQL and MongoDB files'),
    46: ('DELETE.INDEX {Filename} {Dictionaryname} [ALL]\n'
         'DELETE-INDEX {Filename} {Dictionaryname} [ALL]',
         'Deletes the index on the filename using the dictionaryname. To delete all indexes on '
         'a file, omit the dictionaryname and specify ALL'),
    47: ('CREATE.FILE {Filename}\nCREATE-FILE {Filename}\nCREATE.FILE {Filename} TYPE={Filetype}\n'
         'CREATE.FILE {Filename} TYPE={Filetype} ON {Database}',
         'The first format will create a SQL Server file. In the second format Filetype can be '
         'SqlArray, Hashed or Directory. In the third format Filetype can be MongoDB, Universe, '
         'Unidata and Database must be specified.'),
    48: ('TYPE={Filetype}',
         'Used with the CREATE.FILE statement to specify the file type to be created. Filetype '
         'can be SqlArray, Hashed, Directory, MongoDB, Universe, Unidata.'),
    49: ('FORM.LIST {Filename} {Itemname}\nFORM-LIST {Filename} {Itemname}\n'
         'QSELECT {Filename} {Itemname}',
         'Creates an active select list by reading the itemname from the filename and uses each '
         'attribute as a key'),
    50: ('PROFILE {ON} {OFF} {CLEAR} {DISPLAY [FILEIO] [SUBROUTINES] [EXECUTES] [ITYPES] '
         '[ITYPEDETAIL]}\nSTATS {ON} {OFF} {CLEAR} {DISPLAY [FILEIO] [SUBROUTINES] [EXECUTES] '
         '[ITYPES] [ITYPEDETAIL]}',
         'Display profiling information of a process'),
    51: ('AUTOLOGOUT n',
         'Sets the number of seconds before a process automatically logs out if there is no '
         'keyboard input'),
    52: ('CLEARSELECT [{listnumber} {ALL}]',
         'Clears the active select list (listnumber 0), or an optional list number (0-9). If the '
         'ALL option is selected then all lists are cleared. CLEARSELECT with no listnumber '
         'clears all active lists'),
    53: ('CACHE {Tablename}',
         'Allows a process to cache a file in memory. Tablename is the name of the database '
         'table, located in the VOC file definition entry. CACHE is useful when running reports '
         'with lots of translates as it reduces i/o'),
    54: ('LIST.CACHE\nLIST-CACHE', 'Provides statistics on the tables currently cached'),
    55: ('CLEAR.CACHE\nCLEAR-CACHE', 'Clears all currently cached files'),
    56: ('CLEARDATA',
         'Clears the data stack built by DATA statements in either paragraphs or BASIC programs'),
    57: ('COMO {ON} {OFF} {Recordid}',
         'Starts or stops copying of terminal output to a record in the file &COMO&'),
    58: ('CONVERT.UTF8 {Filename}',
         'Converts records in a directory file to UTF8, if a select list is not active all the '
         'records in the file will be converted.'),
    59: ('DATE.FORMAT {ON} {OFF}\nDATE-FORMAT {ON} {OFF}',
         'Sets international date format if ON is specified, sets US date format if OFF is '
         'specified.'),
    60: ('DELETE [DICT] {Filename} [Recordid] [ALL]',
         'Deletes records from a file. If a select list is active, then Recordids in the list '
         'are used.'),
    61: ('DIVERT.OUT {ON} {OFF} {FILE.ON} {FILE.OFF} {TTY.ON} {TTY.OFF} {Filename Itemname} '
         '[APPEND] [TRUNCATE]',
         'Diverts terminal output to a record in a directory file'),
    62: ('ECHO.ON\nECHO.OFF\nECHO-ON\nECHO-OFF\nP',
         'Turns echo of TCL on or off. P toggles the current setting'),
    63: ('ECLTYPE {P} {U}',
         'Displays the current setting of TCL flavor or sets the flavor to (P)ICK or (U)2.'),
    64: ('SEARCH [DICT] {Filename}\nESEARCH [DICT] {Filename}',
         'Prompts for string(s). Searches the file for the string(s). If there is an active '
         'select list these Recordids will be used, otherwise the whole file is searched.'),
    65: ('LOGOFF {Pid}',
         'Logs off the process specified by Pid. If no Pid is specified then the current '
         'process logs out.'),
    66: ('LOGTO {Accountname}', 'Logs to the specified account'),
    67: ('MERGE.LIST {Listnumber 1} {[UNION] [INTERSECT[ION]] [DIFF]} {Listnumber 2} '
         '[TO {Listnumber 3}] [COUNT.SUP]',
         'Merges two numbered select lists using relational set operations, optionally creating '
         'a third numbered list.'),
    68: ('PHANTOM [BRIEF] [SQUAWK] {command}',
         'Starts a background process to run a command. The command can not require input. '
         'The output is written to the &PH& file, unless BRIEF is specified'),
    69: ('RESET', 'Resets session values'),
    70: ('SET.DEBUGGER', ''),
    71: ('SET.FILE {Accountname} {Filename} [q-pointer]\n'
         'SET-FILE {Accountname} {Filename} [q-pointer]',
         'Creates a Q-Pointer to a file in an account, with an optional q-pointer filename. The '
         'account must be linked. If q-pointer is not specified then a pointer with the name '
         'QFILE is created'),
    72: ('SETPTR [unit number, page width, page depth, top margin, bottom margin, mode, options]',
         'Sets printer options for a logical print channel to output either to a printer or a '
         'hold file. SETPTR with no parameters displays the settings of print channel 0.'),
    73: ('SHOW.CONFIG\nSHOW-CONFIG', 'Displays configuration information'),
    74: ('SHOW.LICENSE\nSHOW-LICENSE', 'Displays license information'),
    75: ('SP.STATUS\nSP-STATUS', 'Displays Windows spooler information'),
    76: ('TERM [width, depth, skip, LF delay, FF delay, Backspace, Term Type]',
         'Sets or displays terminal characteristics. Term Type can be console, ansi, wyse50 or '
         'vt220'),
    77: ('UPDATE.SQLSERVER\nUPDATE-SQLSERVER\nDEPLOY.SQLSERVER\nDEPLOY-SQLSERVER',
         'Installs MVON# SQL Server extensions into a SQL Server database'),
    78: ('UPDATE.VOC\nUPDATE-VOC', 'Updates the VOC with the latest MVON# definitions'),
    79: ('VERSION', 'Displays the current version of MVON#'),
    80: ('WHERE', 'Displays the location of the current account'),
    81: ('WHO', 'Displays the current pid, account and Windows user'),
    82: ('ADD.ACCOUNT {Accountname}\nADD-ACCOUNT {Accountname}',
         'Creates a database link to a UniVerse or UniData account in the Account.Xml file.'),
    83: ('DROP.ACCOUNT {Accountname}\nDROP-ACCOUNT {Accountname}',
         'Removes an account from Account.Xml file'),
    84: ('CREATE.ACCOUNT {Accountname}\nCREATE-ACCOUNT {Accountname}',
         'Creates a new account consisting of a SQL Server database containing the VOC, ERRMSG '
         'and DICT.DICT files and their associated dictionaries.'),
    85: ('DELETE.FILE [DICT|DATA] {Filename[,Filename1]}\nDELETE-FILE [DICT|DATA] {Filename}',
         'If no DATA or DICT qualifier is specified, then the dictionary and all data files are '
         'deleted, and the file definition item in the VOC file is removed.'),
    86: ('LIST.INDEX {Filename}\nLIST-INDEX {Filename}',
         'Displays the indexes created on a file to the terminal'),
    87: ('LIST.ACCOUNTS\nLIST-ACCOUNTS', 'Displays the accounts available on the system'),
    88: ('LINKED.ACCOUNTS\nLINKED-ACCOUNTS',
         'Displays all the accounts that are linked to the current account'),
    89: ('CREATE.VIEW {Filename} {Viewname}\nCREATE-VIEW {Filename} {Viewname}',
         'Creates a view on a SQL Server table referenced by Filename. Viewname is a phrase '
         'record in the dictionary of Filename with a list of single valued attributes '
         'contained in the view.'),
    90: ('DELETE.VIEW {Filename} {Viewname}\nDELETE-VIEW {Filename} {Viewname}',
         'Deletes view, Viewname, on a SQL Server table referenced by Filename.'),
    91: ('NSELECT [DICT] {Filename} [FROM Listnumber1] [TO Listnumber2]',
         'Creates a subset of data from an active select list. NSELECT selects elements from '
         'the active select that are not in the specified file.'),
    92: ('SUM {Filename} {Fieldnames}',
         'Adds numeric attributes within a file. SUM produces a total for the attributes added, '
         'and a count of the number of records processed.'),
    93: ('CREATE.MVVIEW {Filename} {Viewname}\nCREATE-MVVIEW {Filename} {Viewname}',
         'Creates a view on a SQL Server table referenced by Filename that displays each '
         'multivalued field as a row in the view.'),
}
